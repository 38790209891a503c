"""Regulatory alert routes"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging
from uuid import UUID
from typing import List

from api.dependencies import get_current_tenant, get_db
from domain.models import Tenant
from domain.schemas.alert_schemas import AlertResponse, MarkAllReadResponse
from services.alert_service import AlertService

router = APIRouter(prefix="/alerts", tags=["Alerts"])
logger = logging.getLogger("reglement.api.alerts")


@router.get("", response_model=List[AlertResponse])
def list_alerts(
    tenant: Tenant = Depends(get_current_tenant), db: Session = Depends(get_db)
):
    """Unread first, then newest first"""
    return AlertService.list_alerts(db, tenant.tenant_id)


@router.get("/unread-count")
def unread_count(
    tenant: Tenant = Depends(get_current_tenant), db: Session = Depends(get_db)
):
    return {"unread": AlertService.count_unread(db, tenant.tenant_id)}


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_read(
    tenant: Tenant = Depends(get_current_tenant), db: Session = Depends(get_db)
):
    updated = AlertService.mark_all_read(db, tenant.tenant_id)
    return MarkAllReadResponse(updated=updated)


@router.post("/{alert_id}/read")
def mark_read(
    alert_id: UUID,
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
):
    AlertService.mark_read(db, tenant.tenant_id, alert_id)
    return {"status": "ok", "alert_id": str(alert_id)}
