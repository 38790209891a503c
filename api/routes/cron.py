"""Scheduled entry point, called by the platform scheduler once a day"""

from fastapi import APIRouter, Depends
import logging

from api.dependencies import get_check_service, get_session_factory, verify_cron_secret
from domain.schemas.check_schemas import DailyCheckReport
from services.regulatory_check_service import RegulatoryCheckService

router = APIRouter(prefix="/cron", tags=["Cron"])
logger = logging.getLogger("reglement.api.cron")


@router.get(
    "/daily-check",
    response_model=DailyCheckReport,
    response_model_by_alias=True,
    dependencies=[Depends(verify_cron_secret)],
)
async def daily_check(
    service: RegulatoryCheckService = Depends(get_check_service),
    session_factory=Depends(get_session_factory),
):
    """Run the check for every tenant; safe to repeat"""
    logger.info("Daily check triggered")
    return await service.run_daily_check(session_factory)
