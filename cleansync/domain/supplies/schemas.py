"""Supply checklist schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ...utils.sanitization import validate_and_sanitize_input

SupplyStatus = Literal["needed", "completed"]


class SupplyCreate(BaseModel):
    """Schema for adding an item to the checklist"""

    item: str

    @field_validator("item")
    @classmethod
    def validate_item(cls, v):
        v = validate_and_sanitize_input(v, max_length=255)
        if not v:
            raise ValueError("Item is required")
        return v


class SupplyUpdate(BaseModel):
    """Schema for toggling an item's status"""

    status: SupplyStatus


class SupplyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    client_id: int
    item: str
    status: str
    created_at: Optional[datetime] = None
