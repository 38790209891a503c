"""
Regulatory alert model - one persisted match between an ingredient and a
watch-list entry.
"""

from sqlalchemy import (
    Column,
    Text,
    Boolean,
    TIMESTAMP,
    ForeignKey,
    UniqueConstraint,
    Uuid,
    false,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base

ALERT_KEY_CONSTRAINT = "uq_regulatory_alert_key"


class RegulatoryAlert(Base):
    """
    Alert raised for a tenant.

    The (owner_id, ingredient_id, substance_name, source) constraint is what
    reconciles two checks racing for the same tenant: the losing insert is
    reported as already recorded instead of failing. Only is_read changes
    after creation.
    """

    __tablename__ = "regulatory_alert"

    alert_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tenant.tenant_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ingredient_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("monitored_ingredient.ingredient_id", ondelete="SET NULL"),
        nullable=True,
    )
    substance_name = Column(Text, nullable=False)
    cas_number = Column(Text)
    source = Column(Text, nullable=False)
    regulation = Column(Text, nullable=False)
    reason = Column(Text)
    reference_url = Column(Text)
    is_read = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint(
            "owner_id",
            "ingredient_id",
            "substance_name",
            "source",
            name=ALERT_KEY_CONSTRAINT,
        ),
    )

    # Relationships
    owner = relationship("Tenant", back_populates="alerts")
    ingredient = relationship("MonitoredIngredient")

    def __repr__(self):
        return (
            f"<RegulatoryAlert(id={self.alert_id}, substance='{self.substance_name}', "
            f"source={self.source})>"
        )
