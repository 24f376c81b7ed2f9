"""
Tests for the workflow, publishing and batch HTTP endpoints.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.api import deps
from src.api.routes import batch, publishing, workflow
from src.components.audit import AuditTrailRecorder
from tests.helpers import complete_config, make_record

ADMIN = {"X-Actor": "alice", "X-Actor-Role": "admin"}
EDITOR = {"X-Actor": "erin", "X-Actor-Role": "editor"}
VIEWER = {"X-Actor": "victor", "X-Actor-Role": "viewer"}


@pytest.fixture
def api_audit() -> AuditTrailRecorder:
    return AuditTrailRecorder()


@pytest.fixture
def app(rules, store, api_audit) -> FastAPI:
    app = FastAPI()
    app.include_router(workflow.router, prefix="/api/workflow")
    app.include_router(publishing.router, prefix="/api/publishing")
    app.include_router(batch.router, prefix="/api/batch")

    app.dependency_overrides[deps.get_rules] = lambda: rules
    app.dependency_overrides[deps.get_content_store] = lambda: store
    app.dependency_overrides[deps.get_audit_trail] = lambda: api_audit
    return app


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def in_review(store):
    record = make_record(id="rec-1", status="in_review", publishing=complete_config())
    store.save_record(record)
    return record


class TestWorkflowEndpoints:
    def test_missing_identity_is_unauthorized(self, client, in_review):
        response = client.post("/api/workflow/rec-1/approve")
        assert response.status_code == 401

    def test_admin_approves(self, client, store, in_review):
        response = client.post("/api/workflow/rec-1/approve", headers=ADMIN)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "published"
        assert body["published_at"] is not None
        assert body["available_actions"] == ["archive"]
        assert store.load_record("rec-1").status == "published"

    def test_editor_approve_is_forbidden(self, client, store, in_review):
        response = client.post("/api/workflow/rec-1/approve", headers=EDITOR)

        assert response.status_code == 403
        assert "approve_review" in response.json()["detail"]
        assert store.load_record("rec-1").status == "in_review"

    def test_wrong_state_is_conflict(self, client, in_review):
        response = client.post("/api/workflow/rec-1/restore", headers=ADMIN)
        assert response.status_code == 409

    def test_unknown_record_is_not_found(self, client):
        response = client.post("/api/workflow/ghost/submit", headers=EDITOR)
        assert response.status_code == 404

    def test_unknown_verb_is_rejected(self, client, in_review):
        response = client.post("/api/workflow/rec-1/teleport", headers=ADMIN)
        assert response.status_code == 422

    def test_unpublishable_returns_errors(self, client, store):
        store.save_record(make_record(id="bare", status="in_review", publishing=None))

        response = client.post("/api/workflow/bare/approve", headers=ADMIN)

        assert response.status_code == 422
        assert response.json()["detail"]["errors"] == ["Publishing config missing"]

    def test_history_newest_first(self, client, in_review):
        client.post("/api/workflow/rec-1/reject", headers=ADMIN)
        client.post("/api/workflow/rec-1/submit", headers=EDITOR)

        response = client.get("/api/workflow/rec-1/history", headers=VIEWER)

        assert response.status_code == 200
        actions = [h["action"] for h in response.json()]
        assert actions == ["submitted_for_review", "rejected"]

    def test_history_needs_view(self, client, in_review):
        response = client.get(
            "/api/workflow/rec-1/history", headers={"X-Actor": "x", "X-Actor-Role": "guest"}
        )
        assert response.status_code == 403

    def test_set_status(self, client, in_review):
        response = client.post(
            "/api/workflow/rec-1/status", json={"status": "archived"}, headers=ADMIN
        )
        assert response.status_code == 200
        assert response.json()["status"] == "archived"

    def test_create_get_edit_delete(self, client, api_audit):
        created = client.post(
            "/api/workflow",
            json={"type": "readings", "title": "At the Clinic"},
            headers=EDITOR,
        )
        assert created.status_code == 201
        content_id = created.json()["id"]
        assert created.json()["status"] == "draft"
        assert created.json()["author"] == "erin"

        fetched = client.get(f"/api/workflow/{content_id}", headers=EDITOR)
        assert fetched.json()["available_actions"] == ["submit_for_review"]

        edited = client.patch(
            f"/api/workflow/{content_id}",
            json={"changes": {"title": "At the Clinic, Part 2"}},
            headers=EDITOR,
        )
        assert edited.status_code == 200
        assert edited.json()["title"] == "At the Clinic, Part 2"

        blocked = client.patch(
            f"/api/workflow/{content_id}",
            json={"changes": {"status": "published"}},
            headers=EDITOR,
        )
        assert blocked.status_code == 409

        assert client.delete(f"/api/workflow/{content_id}", headers=EDITOR).status_code == 403
        assert client.delete(f"/api/workflow/{content_id}", headers=ADMIN).status_code == 204
        assert client.get(f"/api/workflow/{content_id}", headers=ADMIN).status_code == 404

        # History outlives the record
        assert [h.action for h in api_audit.history(content_id)] == ["edited", "created"]


class TestPublishingEndpoints:
    def test_validate_config(self, client):
        response = client.post(
            "/api/publishing/validate",
            json=complete_config(faq=[]).model_dump(),
            headers=VIEWER,
        )

        assert response.status_code == 200
        body = response.json()
        assert body["is_publishable"] is True
        assert body["severity"] == "warning"
        assert body["faq_complete"] is False

    def test_stats_filter_by_type(self, client, store):
        store.save_record(make_record(type="lessons", publishing=complete_config()))
        store.save_record(make_record(type="lessons", publishing=None))
        store.save_record(make_record(type="grammar", publishing=None))

        response = client.get("/api/publishing/stats", params={"type": "lessons"}, headers=VIEWER)

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert body["publishable"] == 1
        assert body["publishable_percent"] == 50


class TestBatchEndpoints:
    def test_batch_publish_partial(self, client, store, in_review):
        response = client.post(
            "/api/batch/publish", json={"ids": ["rec-1", "ghost"]}, headers=ADMIN
        )

        assert response.status_code == 200
        body = response.json()
        assert body["success"] == ["rec-1"]
        assert [f["id"] for f in body["failed"]] == ["ghost"]
        assert store.load_record("rec-1").status == "published"

    def test_empty_id_list_rejected(self, client):
        response = client.post("/api/batch/archive", json={"ids": []}, headers=ADMIN)
        assert response.status_code == 422
