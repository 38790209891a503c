"""
Alert Repository - Data access layer for regulatory alerts.

Writes go through ``insert_alerts``, which reports a per-item outcome instead
of raising on uniqueness conflicts.
"""

from dataclasses import dataclass
import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple
import uuid
from uuid import UUID

from sqlalchemy import and_, func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.enums import InsertOutcome, SourceId
from domain.models import MonitoredIngredient, RegulatoryAlert
from domain.values import AlertKey, ProposedAlert

logger = logging.getLogger("reglement.alerts")

_UPSERT_DIALECTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


@dataclass(frozen=True)
class InsertResult:
    proposal: ProposedAlert
    outcome: InsertOutcome
    alert_id: Optional[UUID] = None


class AlertRepository(BaseRepository[RegulatoryAlert]):
    """Repository for regulatory alert data access"""

    id_field = "alert_id"

    def __init__(self, db: Session):
        super().__init__(db, RegulatoryAlert)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def existing_keys(self, owner_id: UUID) -> Set[AlertKey]:
        """Natural keys of every alert the tenant already has"""
        rows = (
            self.db.query(
                RegulatoryAlert.ingredient_id,
                RegulatoryAlert.substance_name,
                RegulatoryAlert.source,
            )
            .filter(RegulatoryAlert.owner_id == owner_id)
            .all()
        )
        return {
            AlertKey(ingredient_id, substance_name, SourceId(source))
            for ingredient_id, substance_name, source in rows
        }

    def list_for_owner(
        self, owner_id: UUID
    ) -> List[Tuple[RegulatoryAlert, Optional[str]]]:
        """Alerts with their ingredient name, unread first then newest first"""
        return (
            self.db.query(RegulatoryAlert, MonitoredIngredient.name)
            .outerjoin(
                MonitoredIngredient,
                RegulatoryAlert.ingredient_id == MonitoredIngredient.ingredient_id,
            )
            .filter(RegulatoryAlert.owner_id == owner_id)
            .order_by(RegulatoryAlert.is_read, RegulatoryAlert.created_at.desc())
            .all()
        )

    def count_unread(self, owner_id: UUID) -> int:
        return (
            self.db.query(func.count(RegulatoryAlert.alert_id))
            .filter(
                and_(
                    RegulatoryAlert.owner_id == owner_id,
                    RegulatoryAlert.is_read.is_(False),
                )
            )
            .scalar()
        )

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def mark_read(self, alert_id: UUID, owner_id: UUID) -> bool:
        updated = (
            self.db.query(RegulatoryAlert)
            .filter(
                and_(
                    RegulatoryAlert.alert_id == alert_id,
                    RegulatoryAlert.owner_id == owner_id,
                )
            )
            .update({RegulatoryAlert.is_read: True}, synchronize_session=False)
        )
        self.db.commit()
        return updated > 0

    def mark_all_read(self, owner_id: UUID) -> int:
        updated = (
            self.db.query(RegulatoryAlert)
            .filter(
                and_(
                    RegulatoryAlert.owner_id == owner_id,
                    RegulatoryAlert.is_read.is_(False),
                )
            )
            .update({RegulatoryAlert.is_read: True}, synchronize_session=False)
        )
        self.db.commit()
        return updated

    def insert_alerts(
        self, owner_id: UUID, proposals: Sequence[ProposedAlert]
    ) -> List[InsertResult]:
        """
        Persist accepted proposals, one outcome per proposal in input order.

        A row that collides with the uniqueness constraint is reported as
        ALREADY_EXISTS. If the batch statement itself fails, every proposal is
        retried on its own so one bad row cannot sink the rest.
        """
        if not proposals:
            return []

        rows = [self._row(owner_id, proposal) for proposal in proposals]
        upsert = _UPSERT_DIALECTS.get(self.db.get_bind().dialect.name)
        if upsert is not None:
            try:
                return self._insert_batch(upsert, proposals, rows)
            except SQLAlchemyError as exc:
                self.db.rollback()
                logger.warning(
                    "Batch insert of %d alerts failed (%s), retrying one by one",
                    len(rows),
                    exc.__class__.__name__,
                )
        return [
            self._insert_one(proposal, row) for proposal, row in zip(proposals, rows)
        ]

    @staticmethod
    def _row(owner_id: UUID, proposal: ProposedAlert) -> dict:
        entry = proposal.entry
        return {
            "alert_id": uuid.uuid4(),
            "owner_id": owner_id,
            "ingredient_id": proposal.ingredient.ingredient_id,
            "substance_name": entry.name,
            "cas_number": entry.cas_number,
            "source": entry.source_id.value,
            "regulation": entry.regulation,
            "reason": entry.reason,
            "reference_url": entry.reference_url,
            "is_read": False,
        }

    def _insert_batch(
        self, upsert, proposals: Sequence[ProposedAlert], rows: List[dict]
    ) -> List[InsertResult]:
        statement = (
            upsert(RegulatoryAlert)
            .values(rows)
            .on_conflict_do_nothing(
                index_elements=[
                    RegulatoryAlert.owner_id,
                    RegulatoryAlert.ingredient_id,
                    RegulatoryAlert.substance_name,
                    RegulatoryAlert.source,
                ]
            )
            .returning(RegulatoryAlert.alert_id)
        )
        inserted = {alert_id for (alert_id,) in self.db.execute(statement)}
        self.db.commit()

        results = []
        for proposal, row in zip(proposals, rows):
            if row["alert_id"] in inserted:
                results.append(
                    InsertResult(proposal, InsertOutcome.INSERTED, row["alert_id"])
                )
            else:
                results.append(InsertResult(proposal, InsertOutcome.ALREADY_EXISTS))
        return results

    def _insert_one(self, proposal: ProposedAlert, row: dict) -> InsertResult:
        try:
            self.db.add(RegulatoryAlert(**row))
            self.db.commit()
            return InsertResult(proposal, InsertOutcome.INSERTED, row["alert_id"])
        except IntegrityError:
            self.db.rollback()
            if self._key_exists(row):
                return InsertResult(proposal, InsertOutcome.ALREADY_EXISTS)
            logger.error(
                "Integrity error writing alert %s for ingredient %s",
                row["substance_name"],
                row["ingredient_id"],
            )
            return InsertResult(proposal, InsertOutcome.FAILED)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(
                "Failed to write alert %s for ingredient %s",
                row["substance_name"],
                row["ingredient_id"],
            )
            return InsertResult(proposal, InsertOutcome.FAILED)

    def _key_exists(self, row: dict) -> bool:
        return (
            self.db.query(RegulatoryAlert.alert_id)
            .filter(
                and_(
                    RegulatoryAlert.owner_id == row["owner_id"],
                    RegulatoryAlert.ingredient_id == row["ingredient_id"],
                    RegulatoryAlert.substance_name == row["substance_name"],
                    RegulatoryAlert.source == row["source"],
                )
            )
            .first()
            is not None
        )


def count_outcomes(results: Iterable[InsertResult]) -> dict:
    counts = {outcome: 0 for outcome in InsertOutcome}
    for result in results:
        counts[result.outcome] += 1
    return counts
