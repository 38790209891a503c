"""
API dependencies for dependency injection
"""

import secrets
from typing import Generator, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.config import settings
from app.exceptions import UnauthorizedError
from domain.models import SessionLocal, Tenant, get_db_session
from repositories.tenant_repository import TenantRepository
from services.regulatory_check_service import RegulatoryCheckService


def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(db: Session = Depends(get_db)):
            # Use db session here
            pass
    """
    yield from get_db_session()


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def get_current_tenant(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> Tenant:
    """Tenant behind the session token in the Authorization header"""
    token = _bearer_token(authorization)
    if token is None:
        raise UnauthorizedError("Missing session token")
    tenant = TenantRepository(db).get_by_session_token(token)
    if tenant is None:
        raise UnauthorizedError("Invalid or expired session")
    return tenant


def verify_cron_secret(authorization: Optional[str] = Header(None)) -> None:
    """Constant-time check of ``Authorization: Bearer <cron_secret>``"""
    expected = settings.cron_secret
    token = _bearer_token(authorization)
    if not expected or token is None:
        raise UnauthorizedError("Unauthorized")
    if not secrets.compare_digest(token.encode(), expected.encode()):
        raise UnauthorizedError("Unauthorized")


def get_check_service(request: Request) -> RegulatoryCheckService:
    """Service built once in the lifespan, or on first use"""
    service = getattr(request.app.state, "check_service", None)
    if service is None:
        service = RegulatoryCheckService.from_settings(settings)
        request.app.state.check_service = service
    return service


def get_session_factory():
    """Factory handing each tenant of the daily check its own session"""
    return SessionLocal
