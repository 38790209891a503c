from pydantic import BaseModel, Field, field_validator
from typing import Optional
from datetime import datetime
from uuid import UUID


class IngredientCreate(BaseModel):
    """Schema for adding an ingredient to the watch list"""

    name: str = Field(..., min_length=1, description="Ingredient or INCI name")
    cas_number: Optional[str] = Field(
        None, description="CAS registry number, e.g. '117-81-7'"
    )

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Ingredient name is required")
        return v

    @field_validator("cas_number")
    @classmethod
    def blank_cas_is_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None


class IngredientResponse(BaseModel):
    """Schema for a monitored ingredient"""

    ingredient_id: UUID
    owner_id: UUID
    name: str
    cas_number: Optional[str]
    created_at: Optional[datetime]

    model_config = {"from_attributes": True}
