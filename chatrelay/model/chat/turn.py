from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "assistant"]


class Turn(BaseModel):
    model_config = ConfigDict(frozen=True, strict=True)

    role: Role = Field(..., description="Who produced the message: 'user' or 'assistant'")
    content: str = Field(..., description="Message text")
