from pydantic import BaseModel
from typing import Optional
from datetime import datetime
from uuid import UUID


class AlertResponse(BaseModel):
    """Schema for a regulatory alert shown on the dashboard"""

    alert_id: UUID
    ingredient_id: Optional[UUID]
    ingredient_name: Optional[str] = None
    substance_name: str
    cas_number: Optional[str]
    source: str
    regulation: str
    reason: Optional[str]
    reference_url: Optional[str]
    is_read: bool
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}


class MarkAllReadResponse(BaseModel):
    """Number of alerts flipped to read"""

    updated: int
