"""On-demand regulatory check for the signed-in tenant"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from api.dependencies import get_check_service, get_current_tenant, get_db
from domain.models import Tenant
from domain.schemas.check_schemas import CheckReport
from services.regulatory_check_service import RegulatoryCheckService

router = APIRouter(tags=["Checks"])
logger = logging.getLogger("reglement.api.checks")


@router.post(
    "/check-regulations",
    response_model=CheckReport,
    response_model_by_alias=True,
)
async def check_regulations(
    tenant: Tenant = Depends(get_current_tenant),
    db: Session = Depends(get_db),
    service: RegulatoryCheckService = Depends(get_check_service),
):
    """Match the tenant's ingredients against every watch-list and record new alerts"""
    logger.info("On-demand check requested by tenant %s", tenant.tenant_id)
    return await service.check_tenant(db, tenant)
