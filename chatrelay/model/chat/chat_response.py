from pydantic import BaseModel, Field


class ChatResponse(BaseModel):
    reply: str = Field(..., description="Assistant's reply to the user's message")


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Client-facing error message")
