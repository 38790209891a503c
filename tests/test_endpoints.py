"""
HTTP endpoint tests.

Auth failures (session token, cron secret), response shapes of the check
endpoints and the ingredient/alert dashboard routes, all on SQLite.
"""

import uuid
from datetime import timedelta

from sqlalchemy.exc import OperationalError

from app.config import settings
from domain.enums import SourceId
from domain.models import RegulatoryAlert
from repositories.ingredient_repository import IngredientRepository
from test_fixtures import (
    FailingNotifier,
    RecordingNotifier,
    add_ingredient,
    auth_header,
    client,
    create_tenant,
    db_session,
    make_entry,
    make_service,
    override_check_service,
)

ENTRIES = [
    make_entry("Lead", "7439-92-1"),
    make_entry("Hydroquinone", source_id=SourceId.EUR_LEX, regulation="Annex III"),
]
CRON = {"Authorization": "Bearer test-cron-secret"}


def test_health_check():
    r = client.get("/health-check")
    assert r.status_code == 200
    assert r.json()["service"] == "ReglementAlert"


# ============================================================================
# Authentication
# ============================================================================


def test_check_regulations_requires_session(db_session, override_check_service):
    notifier = RecordingNotifier()
    override_check_service(make_service(ENTRIES, notifier))

    for headers in ({}, {"Authorization": "Token abc"}, auth_header("nope")):
        r = client.post("/check-regulations", headers=headers)
        assert r.status_code == 401
        body = r.json()
        assert body["success"] is False
        assert body["error"]["code"] == "UNAUTHORIZED"

    assert notifier.sent == []


def test_expired_session_is_rejected(db_session):
    create_tenant(db_session, token="old", expires_in=timedelta(minutes=-5))

    r = client.get("/ingredients", headers=auth_header("old"))

    assert r.status_code == 401


def test_cron_rejects_wrong_or_missing_secret(db_session, override_check_service):
    tenant = create_tenant(db_session)
    add_ingredient(db_session, tenant, "Lead")
    override_check_service(make_service(ENTRIES))

    assert client.get("/cron/daily-check").status_code == 401
    r = client.get("/cron/daily-check", headers={"Authorization": "Bearer wrong"})
    assert r.status_code == 401
    assert db_session.query(RegulatoryAlert).count() == 0


def test_cron_rejects_everything_when_secret_unset(db_session, override_check_service, monkeypatch):
    monkeypatch.setattr(settings, "cron_secret", None)
    override_check_service(make_service(ENTRIES))

    r = client.get("/cron/daily-check", headers={"Authorization": "Bearer "})

    assert r.status_code == 401


# ============================================================================
# Check endpoints
# ============================================================================


def test_check_regulations_response_shape(db_session, override_check_service):
    tenant = create_tenant(db_session, token="tok")
    add_ingredient(db_session, tenant, "Lead")
    override_check_service(make_service(ENTRIES))

    r = client.post("/check-regulations", headers=auth_header("tok"))

    assert r.status_code == 200
    body = r.json()
    assert body["sourceCounts"] == {"ECHA_SVHC": 1, "EUR_LEX": 1}
    assert body["ingredientsChecked"] == 1
    assert body["alertsCreated"] == 1
    assert body["duplicatesSkipped"] == 0
    assert body["emailSent"] is True
    assert body["degradedSources"] == []
    assert body["sourceStatuses"] == {"ECHA_SVHC": "fresh", "EUR_LEX": "fresh"}


def test_check_regulations_email_failure_still_200(db_session, override_check_service):
    tenant = create_tenant(db_session, token="tok")
    add_ingredient(db_session, tenant, "Lead")
    override_check_service(make_service(ENTRIES, FailingNotifier()))

    r = client.post("/check-regulations", headers=auth_header("tok"))

    assert r.status_code == 200
    assert r.json()["alertsCreated"] == 1
    assert r.json()["emailSent"] is False


def test_check_regulations_read_failure_is_500(db_session, override_check_service, monkeypatch):
    create_tenant(db_session, token="tok")
    override_check_service(make_service(ENTRIES))

    def broken(self, owner_id):
        raise OperationalError("SELECT", {}, Exception("connection lost"))

    monkeypatch.setattr(IngredientRepository, "refs_for_owner", broken)

    r = client.post("/check-regulations", headers=auth_header("tok"))

    assert r.status_code == 500
    assert r.json()["error"]["code"] == "PERSISTENCE_READ_ERROR"


def test_daily_check_response_shape(db_session, override_check_service):
    tenant = create_tenant(db_session)
    add_ingredient(db_session, tenant, "Hydroquinone")
    override_check_service(make_service(ENTRIES))

    r = client.get("/cron/daily-check", headers=CRON)

    assert r.status_code == 200
    body = r.json()
    assert body["tenantsChecked"] == 1
    assert body["tenantsFailed"] == 0
    assert body["alertsCreated"] == 1
    assert body["notificationsSent"] == 1
    assert isinstance(body["elapsedSeconds"], float)

    again = client.get("/cron/daily-check", headers=CRON).json()
    assert again["alertsCreated"] == 0


# ============================================================================
# Ingredients
# ============================================================================


def test_ingredient_crud(db_session):
    create_tenant(db_session, token="tok")
    headers = auth_header("tok")

    r = client.post("/ingredients", json={"name": "  Talc ", "cas_number": "  "}, headers=headers)
    assert r.status_code == 201
    created = r.json()
    assert created["name"] == "Talc"
    assert created["cas_number"] is None

    listed = client.get("/ingredients", headers=headers).json()
    assert [i["ingredient_id"] for i in listed] == [created["ingredient_id"]]

    r = client.delete(f"/ingredients/{created['ingredient_id']}", headers=headers)
    assert r.status_code == 200
    assert client.get("/ingredients", headers=headers).json() == []


def test_blank_ingredient_name_is_rejected(db_session):
    create_tenant(db_session, token="tok")

    r = client.post("/ingredients", json={"name": "   "}, headers=auth_header("tok"))

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"


def test_cannot_delete_another_tenants_ingredient(db_session):
    owner = create_tenant(db_session, token="owner")
    create_tenant(db_session, token="intruder")
    ingredient = add_ingredient(db_session, owner, "Lead")

    r = client.delete(f"/ingredients/{ingredient.ingredient_id}", headers=auth_header("intruder"))

    assert r.status_code == 404
    assert r.json()["error"]["code"] == "NOT_FOUND"


# ============================================================================
# Alerts
# ============================================================================


def test_alert_listing_and_read_flags(db_session, override_check_service):
    tenant = create_tenant(db_session, token="tok")
    add_ingredient(db_session, tenant, "Lead")
    add_ingredient(db_session, tenant, "Hydroquinone")
    override_check_service(make_service(ENTRIES))
    headers = auth_header("tok")
    client.post("/check-regulations", headers=headers)

    alerts = client.get("/alerts", headers=headers).json()
    assert len(alerts) == 2
    assert {a["ingredient_name"] for a in alerts} == {"Lead", "Hydroquinone"}
    assert client.get("/alerts/unread-count", headers=headers).json() == {"unread": 2}

    r = client.post(f"/alerts/{alerts[0]['alert_id']}/read", headers=headers)
    assert r.status_code == 200
    assert client.get("/alerts/unread-count", headers=headers).json() == {"unread": 1}

    r = client.post("/alerts/read-all", headers=headers)
    assert r.json() == {"updated": 1}


def test_mark_unknown_alert_read_is_404(db_session):
    create_tenant(db_session, token="tok")

    r = client.post(f"/alerts/{uuid.uuid4()}/read", headers=auth_header("tok"))

    assert r.status_code == 404
