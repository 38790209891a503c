"""Ingredient service - a tenant's watch list of declared ingredients."""

from typing import List
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from app.exceptions import NotFoundError
from domain.models import MonitoredIngredient
from domain.schemas.ingredient_schemas import IngredientCreate
from repositories.ingredient_repository import IngredientRepository

logger = logging.getLogger("reglement.ingredients")


class IngredientService:
    """Business logic for monitored ingredients."""

    @staticmethod
    def list_ingredients(db: Session, owner_id: UUID) -> List[MonitoredIngredient]:
        return IngredientRepository(db).get_by_owner(owner_id)

    @staticmethod
    def add_ingredient(
        db: Session, owner_id: UUID, payload: IngredientCreate
    ) -> MonitoredIngredient:
        """
        Add an ingredient to the tenant's watch list.

        The schema has already trimmed the name and turned a blank CAS number
        into None. Near-duplicate names are accepted as-is.
        """
        ingredient = IngredientRepository(db).add(
            owner_id, payload.name, payload.cas_number
        )
        logger.info(
            "Tenant %s added ingredient %s (cas=%s)",
            owner_id,
            ingredient.name,
            ingredient.cas_number or "-",
        )
        return ingredient

    @staticmethod
    def delete_ingredient(db: Session, owner_id: UUID, ingredient_id: UUID) -> None:
        """Remove an ingredient; its alerts stay with ingredient_id cleared"""
        if not IngredientRepository(db).delete_for_owner(ingredient_id, owner_id):
            raise NotFoundError(f"Ingredient {ingredient_id} not found")
        logger.info("Tenant %s removed ingredient %s", owner_id, ingredient_id)
