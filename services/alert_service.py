from typing import List
from sqlalchemy.orm import Session
import logging
from uuid import UUID

from app.exceptions import NotFoundError
from domain.schemas.alert_schemas import AlertResponse
from repositories.alert_repository import AlertRepository

logger = logging.getLogger("reglement.alerts")


class AlertService:
    @staticmethod
    def list_alerts(db: Session, owner_id: UUID) -> List[AlertResponse]:
        """Unread first, newest first, with the ingredient name when it still exists"""
        rows = AlertRepository(db).list_for_owner(owner_id)
        alerts = []
        for alert, ingredient_name in rows:
            response = AlertResponse.model_validate(alert)
            response.ingredient_name = ingredient_name
            alerts.append(response)
        return alerts

    @staticmethod
    def mark_read(db: Session, owner_id: UUID, alert_id: UUID) -> None:
        if not AlertRepository(db).mark_read(alert_id, owner_id):
            raise NotFoundError(f"Alert {alert_id} not found")

    @staticmethod
    def mark_all_read(db: Session, owner_id: UUID) -> int:
        updated = AlertRepository(db).mark_all_read(owner_id)
        logger.info("Tenant %s marked %d alert(s) read", owner_id, updated)
        return updated

    @staticmethod
    def count_unread(db: Session, owner_id: UUID) -> int:
        return AlertRepository(db).count_unread(owner_id)
