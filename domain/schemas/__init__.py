"""
Domain schemas package - Pydantic models for validation.
"""

from domain.schemas.ingredient_schemas import IngredientCreate, IngredientResponse
from domain.schemas.alert_schemas import AlertResponse, MarkAllReadResponse
from domain.schemas.check_schemas import CheckReport, DailyCheckReport
from domain.schemas.notification_schemas import AlertNotification, AlertSummaryItem

__all__ = [
    # Ingredient schemas
    "IngredientCreate",
    "IngredientResponse",
    # Alert schemas
    "AlertResponse",
    "MarkAllReadResponse",
    # Check schemas
    "CheckReport",
    "DailyCheckReport",
    # Notification schemas
    "AlertNotification",
    "AlertSummaryItem",
]
