"""
Regulatory check orchestration.

``check_tenant`` runs the on-demand check for the signed-in tenant;
``run_daily_check`` runs the same pipeline for every tenant that monitors at
least one ingredient. Both share ``_process_tenant`` for the per-tenant part:

    existing keys -> dedup -> insert -> notify (only rows actually inserted)

Blocking SQLAlchemy calls are pushed to worker threads with
``anyio.to_thread.run_sync`` so source fetches and email calls never wait on
the database.
"""

from dataclasses import dataclass
import logging
import time
from typing import Callable, List, Optional, Sequence
from uuid import UUID

import anyio
from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from adapters.notifier import Notifier, build_notifier
from adapters.sources import build_providers
from app.exceptions import NotificationError, PersistenceReadError
from domain.enums import InsertOutcome
from domain.schemas.check_schemas import CheckReport, DailyCheckReport
from domain.schemas.notification_schemas import AlertNotification, AlertSummaryItem
from domain.values import IngredientRef, SubstanceEntry, TenantContact, TenantWorkload
from repositories.alert_repository import AlertRepository, InsertResult, count_outcomes
from repositories.ingredient_repository import IngredientRepository
from repositories.tenant_repository import TenantRepository
from services.dedup import deduplicate
from services.matching import DEFAULT_POLICY, MatchPolicy, collect_matches
from services.normalizer import Normalizer

logger = logging.getLogger("reglement.check")
daily_logger = logging.getLogger("reglement.daily_check")


@dataclass
class TenantOutcome:
    """What ``_process_tenant`` did for one tenant"""

    matches: int = 0
    duplicates_skipped: int = 0
    inserted: int = 0
    already_recorded: int = 0
    write_failures: int = 0
    email_sent: bool = False


class RegulatoryCheckService:
    def __init__(
        self,
        normalizer: Normalizer,
        notifier: Notifier,
        policy: MatchPolicy = DEFAULT_POLICY,
        tenant_concurrency: int = 1,
    ):
        self.normalizer = normalizer
        self.notifier = notifier
        self.policy = policy
        self.tenant_concurrency = max(1, tenant_concurrency)

    @classmethod
    def from_settings(cls, settings) -> "RegulatoryCheckService":
        return cls(
            normalizer=Normalizer.from_settings(settings, build_providers(settings)),
            notifier=build_notifier(settings),
            policy=MatchPolicy.from_settings(settings),
            tenant_concurrency=settings.tenant_concurrency,
        )

    # ------------------------------------------------------------------
    # On-demand check
    # ------------------------------------------------------------------

    async def check_tenant(self, db: Session, tenant) -> CheckReport:
        """
        Check one tenant's ingredients against every source.

        Raises PersistenceReadError when the ingredient list or the existing
        alerts cannot be read; nothing is written in that case.
        """
        contact = TenantContact(
            tenant_id=tenant.tenant_id,
            email=tenant.email,
            company_name=tenant.company_name,
        )
        try:
            ingredients = await to_thread.run_sync(
                IngredientRepository(db).refs_for_owner, contact.tenant_id
            )
        except SQLAlchemyError as exc:
            logger.error("Failed to load ingredients for tenant %s: %s", contact.tenant_id, exc)
            raise PersistenceReadError(
                "Could not load monitored ingredients", tenant_id=contact.tenant_id
            ) from exc

        normalized = await self.normalizer.collect()
        report = CheckReport(
            source_counts=normalized.source_counts,
            ingredients_checked=len(ingredients),
            entries_considered=len(normalized.entries),
            degraded_sources=normalized.degraded_sources,
            source_statuses=normalized.source_statuses,
        )
        if not ingredients:
            logger.info("Tenant %s has no monitored ingredients", contact.tenant_id)
            return report

        outcome = await self._process_tenant(db, contact, ingredients, normalized.entries)
        report.alerts_created = outcome.inserted
        report.duplicates_skipped = outcome.duplicates_skipped
        report.already_recorded = outcome.already_recorded
        report.write_failures = outcome.write_failures
        report.email_sent = outcome.email_sent
        return report

    # ------------------------------------------------------------------
    # Scheduled check
    # ------------------------------------------------------------------

    async def run_daily_check(self, session_factory: Callable[[], Session]) -> DailyCheckReport:
        """
        Check every tenant with at least one monitored ingredient.

        Sources are fetched once per run. A failure inside one tenant is
        logged and counted; the remaining tenants are still processed.
        """
        started = time.monotonic()
        report = DailyCheckReport()

        try:
            workloads = await to_thread.run_sync(self._load_workloads, session_factory)
        except SQLAlchemyError as exc:
            daily_logger.error("Failed to load monitored ingredients: %s", exc)
            raise PersistenceReadError("Could not load monitored ingredients") from exc
        if not workloads:
            daily_logger.info("No monitored ingredients, nothing to do")
            report.elapsed_seconds = round(time.monotonic() - started, 3)
            return report

        normalized = await self.normalizer.collect()
        report.source_counts = normalized.source_counts
        report.source_statuses = normalized.source_statuses
        daily_logger.info("%d tenant(s) with monitored ingredients", len(workloads))

        limiter = anyio.CapacityLimiter(self.tenant_concurrency)

        async def run_one(workload: TenantWorkload) -> None:
            async with limiter:
                outcome = await self._run_isolated(
                    session_factory, workload, normalized.entries
                )
            if outcome is None:
                report.tenants_failed += 1
                return
            report.tenants_checked += 1
            report.alerts_created += outcome.inserted
            if outcome.email_sent:
                report.notifications_sent += 1

        async with anyio.create_task_group() as tg:
            for workload in workloads:
                if not workload.contact.email:
                    daily_logger.warning(
                        "No email for tenant %s, skipping", workload.contact.tenant_id
                    )
                    continue
                tg.start_soon(run_one, workload)

        report.elapsed_seconds = round(time.monotonic() - started, 3)
        daily_logger.info(
            "Done: %d tenant(s) checked, %d failed, %d alert(s) created, "
            "%d notification(s) sent in %.1fs",
            report.tenants_checked,
            report.tenants_failed,
            report.alerts_created,
            report.notifications_sent,
            report.elapsed_seconds,
        )
        return report

    @staticmethod
    def _load_workloads(session_factory: Callable[[], Session]) -> List[TenantWorkload]:
        db = session_factory()
        try:
            return TenantRepository(db).load_workloads()
        finally:
            db.close()

    async def _run_isolated(
        self,
        session_factory: Callable[[], Session],
        workload: TenantWorkload,
        entries: Sequence[SubstanceEntry],
    ) -> Optional[TenantOutcome]:
        """Process one tenant on its own session; None when it failed"""
        contact = workload.contact
        daily_logger.info(
            "Tenant %s (%s): %d ingredient(s)",
            contact.email,
            contact.display_name,
            len(workload.ingredients),
        )
        db: Optional[Session] = None
        try:
            db = session_factory()
            return await self._process_tenant(db, contact, workload.ingredients, entries)
        except Exception:
            daily_logger.exception("Check failed for tenant %s", contact.tenant_id)
            return None
        finally:
            if db is not None:
                await to_thread.run_sync(db.close)

    # ------------------------------------------------------------------
    # Shared per-tenant pipeline
    # ------------------------------------------------------------------

    async def _process_tenant(
        self,
        db: Session,
        contact: TenantContact,
        ingredients: Sequence[IngredientRef],
        entries: Sequence[SubstanceEntry],
    ) -> TenantOutcome:
        outcome = TenantOutcome()
        proposals = collect_matches(ingredients, entries, self.policy)
        outcome.matches = len(proposals)
        if not proposals:
            logger.info("Tenant %s: no matches", contact.tenant_id)
            return outcome

        repo = AlertRepository(db)
        try:
            existing = await to_thread.run_sync(repo.existing_keys, contact.tenant_id)
        except SQLAlchemyError as exc:
            raise PersistenceReadError(
                "Could not load existing alerts", tenant_id=contact.tenant_id
            ) from exc

        deduped = deduplicate(existing, proposals)
        outcome.duplicates_skipped = deduped.duplicates_skipped
        if not deduped.accepted:
            logger.info(
                "Tenant %s: %d match(es), all already alerted",
                contact.tenant_id,
                outcome.matches,
            )
            return outcome

        results = await to_thread.run_sync(
            repo.insert_alerts, contact.tenant_id, deduped.accepted
        )
        counts = count_outcomes(results)
        outcome.inserted = counts[InsertOutcome.INSERTED]
        outcome.already_recorded = counts[InsertOutcome.ALREADY_EXISTS]
        outcome.write_failures = counts[InsertOutcome.FAILED]
        logger.info(
            "Tenant %s: %d match(es), %d duplicate(s), %d inserted, "
            "%d already recorded, %d failed",
            contact.tenant_id,
            outcome.matches,
            outcome.duplicates_skipped,
            outcome.inserted,
            outcome.already_recorded,
            outcome.write_failures,
        )

        inserted = [r for r in results if r.outcome == InsertOutcome.INSERTED]
        if inserted:
            outcome.email_sent = await self._notify(contact, inserted)
        return outcome

    async def _notify(self, contact: TenantContact, inserted: List[InsertResult]) -> bool:
        if not contact.email:
            logger.warning("Tenant %s has no email, notification skipped", contact.tenant_id)
            return False

        notification = AlertNotification(
            recipient=contact.email,
            display_name=contact.display_name,
            alerts=[
                AlertSummaryItem(
                    substance_name=r.proposal.entry.name,
                    cas_number=r.proposal.entry.cas_number,
                    ingredient_name=r.proposal.ingredient.name,
                    reason=r.proposal.entry.reason,
                    source_id=r.proposal.entry.source_id,
                )
                for r in inserted
            ],
        )
        try:
            await self.notifier.send(notification)
        except NotificationError as exc:
            logger.error("Notification to %s failed: %s", contact.email, exc)
            return False
        except Exception:
            logger.exception("Notification to %s failed unexpectedly", contact.email)
            return False
        return True
