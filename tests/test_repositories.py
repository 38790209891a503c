"""
Tests for the repository layer against a real (SQLite) database.

This test suite validates:
- AlertRepository: insert outcomes, ON CONFLICT handling, per-item fallback,
  read/unread bookkeeping, ordering
- IngredientRepository: owner scoping, deletion keeping alerts
- TenantRepository: session token lookup, workload grouping
"""

import uuid
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import OperationalError

from domain.enums import InsertOutcome, MatchKind, SourceId
from domain.models import RegulatoryAlert
from domain.values import AlertKey, IngredientRef, ProposedAlert
from repositories.alert_repository import AlertRepository
from repositories.ingredient_repository import IngredientRepository
from repositories.tenant_repository import TenantRepository
from test_fixtures import add_ingredient, create_tenant, db_session, make_entry


def _proposal(ingredient, entry):
    return ProposedAlert(
        ingredient=IngredientRef.from_model(ingredient),
        entry=entry,
        match_kind=MatchKind.NAME_MATCH,
    )


# ============================================================================
# AlertRepository
# ============================================================================


def test_insert_alerts_reports_inserted_rows(db_session):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead", "7439-92-1")
    proposals = [
        _proposal(ingredient, make_entry("Lead", "7439-92-1")),
        _proposal(ingredient, make_entry("Lead", source_id=SourceId.EUR_LEX, regulation="Annex II")),
    ]

    results = AlertRepository(db_session).insert_alerts(tenant.tenant_id, proposals)

    assert [r.outcome for r in results] == [InsertOutcome.INSERTED, InsertOutcome.INSERTED]
    assert all(r.alert_id is not None for r in results)
    assert db_session.query(RegulatoryAlert).count() == 2


def test_conflicting_insert_is_already_exists_not_error(db_session):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    repo = AlertRepository(db_session)
    proposal = _proposal(ingredient, make_entry("Lead"))
    repo.insert_alerts(tenant.tenant_id, [proposal])

    # a second run that read its keys before the first one wrote
    results = repo.insert_alerts(
        tenant.tenant_id, [proposal, _proposal(ingredient, make_entry("Lead acetate"))]
    )

    assert [r.outcome for r in results] == [
        InsertOutcome.ALREADY_EXISTS,
        InsertOutcome.INSERTED,
    ]
    assert db_session.query(RegulatoryAlert).count() == 2


def test_batch_failure_falls_back_to_single_inserts(db_session, monkeypatch):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    repo = AlertRepository(db_session)
    repo.insert_alerts(tenant.tenant_id, [_proposal(ingredient, make_entry("Lead"))])

    def broken_batch(*args, **kwargs):
        raise OperationalError("INSERT ... RETURNING", {}, Exception("not supported"))

    monkeypatch.setattr(repo, "_insert_batch", broken_batch)

    results = repo.insert_alerts(
        tenant.tenant_id,
        [
            _proposal(ingredient, make_entry("Lead")),
            _proposal(ingredient, make_entry("Lead chromate")),
        ],
    )

    assert [r.outcome for r in results] == [
        InsertOutcome.ALREADY_EXISTS,
        InsertOutcome.INSERTED,
    ]


def test_existing_keys_returns_natural_keys(db_session):
    tenant = create_tenant(db_session)
    other = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    foreign = add_ingredient(db_session, other, "Lead")
    repo = AlertRepository(db_session)
    repo.insert_alerts(tenant.tenant_id, [_proposal(ingredient, make_entry("Lead"))])
    repo.insert_alerts(other.tenant_id, [_proposal(foreign, make_entry("Lead"))])

    keys = repo.existing_keys(tenant.tenant_id)

    assert keys == {AlertKey(ingredient.ingredient_id, "Lead", SourceId.ECHA_SVHC)}


def test_mark_read_is_scoped_to_owner(db_session):
    tenant = create_tenant(db_session)
    intruder = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    repo = AlertRepository(db_session)
    [result] = repo.insert_alerts(tenant.tenant_id, [_proposal(ingredient, make_entry("Lead"))])

    assert repo.mark_read(result.alert_id, intruder.tenant_id) is False
    assert repo.count_unread(tenant.tenant_id) == 1
    assert repo.mark_read(result.alert_id, tenant.tenant_id) is True
    assert repo.count_unread(tenant.tenant_id) == 0


def test_mark_all_read_counts_only_unread(db_session):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    repo = AlertRepository(db_session)
    results = repo.insert_alerts(
        tenant.tenant_id,
        [
            _proposal(ingredient, make_entry("Lead")),
            _proposal(ingredient, make_entry("Lead acetate")),
            _proposal(ingredient, make_entry("Lead chromate")),
        ],
    )
    repo.mark_read(results[0].alert_id, tenant.tenant_id)

    assert repo.mark_all_read(tenant.tenant_id) == 2
    assert repo.mark_all_read(tenant.tenant_id) == 0


def test_list_for_owner_puts_unread_first_with_ingredient_name(db_session):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead pigment")
    repo = AlertRepository(db_session)
    results = repo.insert_alerts(
        tenant.tenant_id,
        [_proposal(ingredient, make_entry("Lead")), _proposal(ingredient, make_entry("Lead acetate"))],
    )
    repo.mark_read(results[0].alert_id, tenant.tenant_id)

    rows = repo.list_for_owner(tenant.tenant_id)

    assert [(alert.substance_name, alert.is_read) for alert, _ in rows] == [
        ("Lead acetate", False),
        ("Lead", True),
    ]
    assert {name for _, name in rows} == {"Lead pigment"}


# ============================================================================
# IngredientRepository
# ============================================================================


def test_deleting_ingredient_keeps_its_alerts(db_session):
    tenant = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")
    AlertRepository(db_session).insert_alerts(
        tenant.tenant_id, [_proposal(ingredient, make_entry("Lead"))]
    )

    assert IngredientRepository(db_session).delete_for_owner(
        ingredient.ingredient_id, tenant.tenant_id
    )

    db_session.expire_all()
    alert = db_session.query(RegulatoryAlert).one()
    assert alert.ingredient_id is None
    assert AlertRepository(db_session).list_for_owner(tenant.tenant_id)[0][1] is None


def test_delete_for_owner_ignores_other_tenants(db_session):
    tenant = create_tenant(db_session)
    intruder = create_tenant(db_session)
    ingredient = add_ingredient(db_session, tenant, "Lead")

    assert not IngredientRepository(db_session).delete_for_owner(
        ingredient.ingredient_id, intruder.tenant_id
    )
    assert IngredientRepository(db_session).get_by_id(ingredient.ingredient_id) is not None


# ============================================================================
# TenantRepository
# ============================================================================


def test_session_token_lookup(db_session):
    tenant = create_tenant(db_session, token="live-token")
    create_tenant(db_session, token="stale-token", expires_in=timedelta(hours=-1))
    repo = TenantRepository(db_session)

    assert repo.get_by_session_token("live-token").tenant_id == tenant.tenant_id
    assert repo.get_by_session_token("stale-token") is None
    assert repo.get_by_session_token("unknown") is None


def test_session_without_expiry_stays_valid(db_session):
    tenant = create_tenant(db_session, token="forever", expires_in=None)
    later = datetime.now(timezone.utc) + timedelta(days=365)

    found = TenantRepository(db_session).get_by_session_token("forever", now=later)

    assert found.tenant_id == tenant.tenant_id


def test_load_workloads_groups_ingredients_by_tenant(db_session):
    first = create_tenant(db_session, company_name="Atelier A")
    second = create_tenant(db_session, company_name=None)
    create_tenant(db_session)  # no ingredients, not part of the run
    add_ingredient(db_session, first, "Lead")
    add_ingredient(db_session, first, "Talc")
    add_ingredient(db_session, second, "Hydroquinone")

    workloads = {w.contact.tenant_id: w for w in TenantRepository(db_session).load_workloads()}

    assert set(workloads) == {first.tenant_id, second.tenant_id}
    assert sorted(i.name for i in workloads[first.tenant_id].ingredients) == ["Lead", "Talc"]
    assert workloads[first.tenant_id].contact.display_name == "Atelier A"
    assert workloads[second.tenant_id].contact.display_name == second.email
    assert workloads[second.tenant_id].contact.company_name is None
    assert uuid.UUID(str(workloads[second.tenant_id].contact.tenant_id))
