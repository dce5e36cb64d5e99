"""Chat assistant schemas"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class ChatRequest(BaseModel):
    message: str = Field(..., max_length=2000)
    threadId: Optional[str] = None

    @field_validator("message")
    @classmethod
    def validate_message(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Message is required")
        return v


class AssistantReply(BaseModel):
    """What the rule-based assistant decided"""

    text: str
    action: Optional[str] = None
    data: Optional[Any] = None
    intent: Optional[str] = None
    confidence: float = 0.0
    sentiment: str = "neutral"
    urgent: bool = False


class ChatResponse(AssistantReply):
    """Rule-based reply, plus the hosted assistant's answer when it is enabled"""

    message: Optional[str] = None
    threadId: Optional[str] = None
