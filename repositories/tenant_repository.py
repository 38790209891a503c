"""
Tenant Repository - Data access layer for tenants and their sessions
"""

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import Tenant, TenantSession, MonitoredIngredient
from domain.values import IngredientRef, TenantContact, TenantWorkload


def _as_utc(value: datetime) -> datetime:
    # SQLite hands timestamps back naive; they are stored as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class TenantRepository(BaseRepository[Tenant]):
    """Repository for tenant data access"""

    id_field = "tenant_id"

    def __init__(self, db: Session):
        super().__init__(db, Tenant)

    def get_by_session_token(
        self, token: str, now: Optional[datetime] = None
    ) -> Optional[Tenant]:
        """Tenant owning a live session token, None when unknown or expired"""
        session = (
            self.db.query(TenantSession).filter(TenantSession.token == token).first()
        )
        if session is None:
            return None
        now = now or datetime.now(timezone.utc)
        if session.expires_at is not None and _as_utc(session.expires_at) <= now:
            return None
        return session.tenant

    def add_session(
        self, tenant_id: UUID, token: str, expires_at: Optional[datetime] = None
    ) -> TenantSession:
        session = TenantSession(token=token, tenant_id=tenant_id, expires_at=expires_at)
        self.db.add(session)
        self.db.commit()
        return session

    def load_workloads(self) -> List[TenantWorkload]:
        """
        Every monitored ingredient with its owner's contact, grouped by tenant.

        One query; tenants appear in the order their first ingredient does.
        """
        rows = (
            self.db.query(MonitoredIngredient, Tenant.email, Tenant.company_name)
            .join(Tenant, MonitoredIngredient.owner_id == Tenant.tenant_id)
            .order_by(MonitoredIngredient.created_at, MonitoredIngredient.ingredient_id)
            .all()
        )

        workloads: dict[UUID, TenantWorkload] = {}
        for ingredient, email, company_name in rows:
            workload = workloads.get(ingredient.owner_id)
            if workload is None:
                workload = TenantWorkload(
                    contact=TenantContact(
                        tenant_id=ingredient.owner_id,
                        email=email,
                        company_name=company_name,
                    )
                )
                workloads[ingredient.owner_id] = workload
            workload.ingredients.append(IngredientRef.from_model(ingredient))
        return list(workloads.values())
