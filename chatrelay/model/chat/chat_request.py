from pydantic import BaseModel, Field
from typing import Any, Optional


class ChatRequest(BaseModel):
    message: Optional[Any] = Field(None, description="User's new message, checked by the relay service")
    history: Optional[Any] = Field(None, description="Prior turns, oldest first; malformed entries are dropped by the relay service")
