"""
Tenant-related database models.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class Tenant(Base):
    """Company account; every ingredient and alert belongs to exactly one tenant"""

    __tablename__ = "tenant"

    tenant_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    email = Column(Text, unique=True, nullable=False)
    company_name = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    ingredients = relationship(
        "MonitoredIngredient", back_populates="owner", cascade="all, delete-orphan"
    )
    alerts = relationship(
        "RegulatoryAlert", back_populates="owner", cascade="all, delete-orphan"
    )
    sessions = relationship(
        "TenantSession", back_populates="tenant", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Tenant(id={self.tenant_id}, email='{self.email}')>"


class TenantSession(Base):
    """
    Opaque session token issued by the identity provider.

    Only the lookup is handled here; issuing and refreshing tokens happens
    outside this service.
    """

    __tablename__ = "tenant_session"

    token = Column(Text, primary_key=True)
    tenant_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tenant.tenant_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at = Column(TIMESTAMP(timezone=True))
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    # Relationships
    tenant = relationship("Tenant", back_populates="sessions")
