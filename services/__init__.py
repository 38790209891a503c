"""Services package - Business logic layer"""

from services.ingredient_service import IngredientService
from services.alert_service import AlertService
from services.regulatory_check_service import RegulatoryCheckService

# Note: matching, dedup and normalizer expose plain functions / helpers

__all__ = [
    "IngredientService",
    "AlertService",
    "RegulatoryCheckService",
]
