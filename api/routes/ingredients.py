"""Monitored ingredient routes"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_current_tenant, get_db
from domain.models import Tenant
from domain.schemas.ingredient_schemas import IngredientCreate, IngredientResponse
from services.ingredient_service import IngredientService

router = APIRouter(prefix="/ingredients", tags=["Ingredients"])
logger = logging.getLogger("reglement.api.ingredients")


@router.get("", response_model=List[IngredientResponse])
def list_ingredients(
    tenant: Tenant = Depends(get_current_tenant), db: Session = Depends(get_db)
):
    """Get the tenant's monitored ingredients, newest first"""
    items = IngredientService.list_ingredients(db, tenant.tenant_id)
    return [IngredientResponse.model_validate(i) for i in items]


@router.post("", response_model=IngredientResponse, status_code=status.HTTP_201_CREATED)
def add_ingredient(
    payload: IngredientCreate,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """Add an ingredient; a blank CAS number is stored as null"""
    ingredient = IngredientService.add_ingredient(db, tenant.tenant_id, payload)
    return IngredientResponse.model_validate(ingredient)


@router.delete("/{ingredient_id}")
def delete_ingredient(
    ingredient_id: UUID,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    """Delete one of the tenant's ingredients; existing alerts are kept"""
    IngredientService.delete_ingredient(db, tenant.tenant_id, ingredient_id)
    return {"status": "ok", "removed": str(ingredient_id)}
