"""
Repositories package - Data access layer.
"""

from repositories.base import BaseRepository
from repositories.tenant_repository import TenantRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.alert_repository import AlertRepository, InsertResult

__all__ = [
    "BaseRepository",
    "TenantRepository",
    "IngredientRepository",
    "AlertRepository",
    "InsertResult",
]
