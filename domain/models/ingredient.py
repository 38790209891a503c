"""
Monitored ingredient model - substances a tenant declares it uses.
"""

from sqlalchemy import Column, Text, TIMESTAMP, ForeignKey, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
import uuid

from domain.models.database import Base


class MonitoredIngredient(Base):
    """
    Ingredient on a tenant's watch list.

    (owner_id, name) is intentionally not unique: tenants may register
    near-duplicate names. Rows are created and deleted by the tenant and
    never updated otherwise.
    """

    __tablename__ = "monitored_ingredient"

    ingredient_id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("tenant.tenant_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(Text, nullable=False)
    cas_number = Column(Text)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_ingredient_name_not_blank"),
    )

    # Relationships
    owner = relationship("Tenant", back_populates="ingredients")

    def __repr__(self):
        return f"<MonitoredIngredient(id={self.ingredient_id}, name='{self.name}')>"
