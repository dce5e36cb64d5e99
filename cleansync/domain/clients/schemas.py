"""Client domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class LoginRequest(BaseModel):
    """PIN login payload"""

    pin: str


class SuccessResponse(BaseModel):
    success: bool = True


class ClientResponse(BaseModel):
    """Client record as exposed to the portal (never includes the PIN)"""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None
