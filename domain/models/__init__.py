"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    init_database,
    get_db_session,
)
from domain.models.tenant import Tenant, TenantSession
from domain.models.ingredient import MonitoredIngredient
from domain.models.alert import RegulatoryAlert, ALERT_KEY_CONSTRAINT

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "init_database",
    "get_db_session",
    # Tenant models
    "Tenant",
    "TenantSession",
    # Watch list
    "MonitoredIngredient",
    # Alerts
    "RegulatoryAlert",
    "ALERT_KEY_CONSTRAINT",
]
