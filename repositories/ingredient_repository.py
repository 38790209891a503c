"""
Ingredient Repository - Data access layer for a tenant's monitored ingredients
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy import and_
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MonitoredIngredient
from domain.values import IngredientRef


class IngredientRepository(BaseRepository[MonitoredIngredient]):
    """Repository for monitored ingredient data access"""

    id_field = "ingredient_id"

    def __init__(self, db: Session):
        super().__init__(db, MonitoredIngredient)

    def get_by_owner(self, owner_id: UUID) -> List[MonitoredIngredient]:
        """Newest first, as shown on the dashboard"""
        return (
            self.db.query(MonitoredIngredient)
            .filter(MonitoredIngredient.owner_id == owner_id)
            .order_by(MonitoredIngredient.created_at.desc())
            .all()
        )

    def refs_for_owner(self, owner_id: UUID) -> List[IngredientRef]:
        """Detached ingredient views in a stable order for matching"""
        ingredients = (
            self.db.query(MonitoredIngredient)
            .filter(MonitoredIngredient.owner_id == owner_id)
            .order_by(MonitoredIngredient.created_at, MonitoredIngredient.ingredient_id)
            .all()
        )
        return [IngredientRef.from_model(ingredient) for ingredient in ingredients]

    def get_for_owner(
        self, ingredient_id: UUID, owner_id: UUID
    ) -> Optional[MonitoredIngredient]:
        return (
            self.db.query(MonitoredIngredient)
            .filter(
                and_(
                    MonitoredIngredient.ingredient_id == ingredient_id,
                    MonitoredIngredient.owner_id == owner_id,
                )
            )
            .first()
        )

    def add(
        self, owner_id: UUID, name: str, cas_number: Optional[str] = None
    ) -> MonitoredIngredient:
        return self.create(
            MonitoredIngredient(owner_id=owner_id, name=name, cas_number=cas_number)
        )

    def delete_for_owner(self, ingredient_id: UUID, owner_id: UUID) -> bool:
        ingredient = self.get_for_owner(ingredient_id, owner_id)
        if ingredient is None:
            return False
        self.db.delete(ingredient)
        self.db.commit()
        return True
