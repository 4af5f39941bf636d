"""Tests for the FastAPI surface."""

import json
import tempfile
from pathlib import Path

import pytest
import yaml
from fastapi.testclient import TestClient

from fluxmod import config
from fluxmod.audit.log import ModerationAuditLog
from fluxmod.lexicon import store as store_module
from fluxmod.lexicon.models import LexiconConfigError
from fluxmod.lexicon.store import LexiconStore
from web.backend.app.dependencies import get_audit_log, get_lexicon_store
from web.backend.app.main import app

ADMIN = {"X-Admin-Token": "s3cret"}


@pytest.fixture
def client(monkeypatch):
    store = LexiconStore()
    audit = ModerationAuditLog(Path(tempfile.mkdtemp()))
    monkeypatch.setattr(config, "ADMIN_TOKEN", "s3cret")
    app.dependency_overrides[get_lexicon_store] = lambda: store
    app.dependency_overrides[get_audit_log] = lambda: audit
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_moderate(client):
    resp = client.post("/api/ai/moderate", json={"text": "this is spam content"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["flagged"] is True
    assert body["matched_terms"] == ["spam"]
    assert body["reason"] == "Contains inappropriate content"


def test_moderate_rejects_overlong_text(client):
    resp = client.post("/api/ai/moderate", json={"text": "a" * (config.MAX_CONTENT_CHARS + 1)})
    assert resp.status_code == 422


def test_sentiment(client):
    assert client.get("/api/ai/sentiment").json()["message"] == "Sentiment endpoint is active."
    resp = client.post("/api/ai/sentiment", json={"text": "I love this, it's excellent and amazing"})
    body = resp.json()
    assert body["sentiment"] == "Positive"
    assert body["positive_hits"] == 3


def test_captions(client):
    resp = client.post("/api/ai/captions", json={})
    assert len(resp.json()["suggestions"]) == 3
    resp = client.post("/api/ai/captions", json={"context": "launch party", "count": 4})
    suggestions = resp.json()["suggestions"]
    assert len(suggestions) == 4
    assert suggestions[0].startswith("Just launched")


def test_evaluate_records_audit_entry(client):
    resp = client.post(
        "/api/ai/evaluate",
        json={"text": "what a scam, awful", "actor": "bob", "resource_id": "post-1"},
    )
    body = resp.json()
    assert body["moderation"]["flagged"] is True
    assert body["sentiment"]["sentiment"] == "Negative"
    assert body["audit_id"]

    entries = client.get("/api/admin/audit", params={"flagged": True}, headers=ADMIN).json()
    assert len(entries) == 1
    assert entries[0]["actor"] == "bob"
    assert entries[0]["matched_terms"] == ["scam"]

    stats = client.get("/api/admin/stats", headers=ADMIN).json()
    assert stats["total"] == 1
    assert stats["flagged"] == 1
    assert stats["negative"] == 1


def test_admin_requires_token(client):
    assert client.get("/api/admin/stats").status_code == 403
    assert client.get("/api/admin/stats", headers={"X-Admin-Token": "wrong"}).status_code == 403


def test_admin_disabled_without_configured_token(client, monkeypatch):
    monkeypatch.setattr(config, "ADMIN_TOKEN", "")
    assert client.get("/api/admin/stats", headers=ADMIN).status_code == 403


def test_audit_filter_rejects_unknown_sentiment(client):
    resp = client.get("/api/admin/audit", params={"sentiment": "Mixed"}, headers=ADMIN)
    assert resp.status_code == 422


def test_audit_export(client):
    client.post("/api/ai/evaluate", json={"text": "great day"})
    resp = client.get("/api/admin/audit/export", params={"format": "csv"}, headers=ADMIN)
    body = resp.json()
    assert body["format"] == "csv"
    assert body["record_count"] == 1
    assert "Positive" in body["content"]


def test_lexicon_reload(client):
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(
        {
            "version": "3.0.0",
            "moderation": {"custom": ["pineapple"]},
            "sentiment": {"positive": ["sunny"], "negative": ["rainy"]},
        },
        f,
    )
    f.close()

    resp = client.post("/api/admin/lexicon/reload", json={"path": f.name}, headers=ADMIN)
    assert resp.status_code == 200
    assert resp.json()["version"] == "3.0.0"

    assert client.post("/api/ai/moderate", json={"text": "spam"}).json()["flagged"] is False
    assert client.post("/api/ai/moderate", json={"text": "Pineapple"}).json()["flagged"] is True
    assert client.get("/api/admin/lexicon", headers=ADMIN).json()["positive"] == ["sunny"]


def test_bad_lexicon_reload_keeps_current(client):
    resp = client.post(
        "/api/admin/lexicon/reload", json={"path": "/nonexistent.yaml"}, headers=ADMIN
    )
    assert resp.status_code == 422
    assert client.post("/api/ai/moderate", json={"text": "spam"}).json()["flagged"] is True


def test_startup_fails_on_bad_lexicon(monkeypatch):
    monkeypatch.setattr(config, "LEXICON_PATH", "/nonexistent/lexicon.yaml")
    monkeypatch.setattr(store_module, "_store", None)
    with pytest.raises(LexiconConfigError):
        with TestClient(app):
            pass
    assert store_module._store is None


def test_startup_loads_lexicon(monkeypatch):
    monkeypatch.setattr(config, "LEXICON_PATH", "")
    monkeypatch.setattr(store_module, "_store", None)
    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "healthy"}
    assert store_module._store is not None


def test_audit_export_reads_log_once(client):
    reads = []

    class CountingAuditLog(ModerationAuditLog):
        def _read_all_entries(self):
            reads.append(1)
            return super()._read_all_entries()

    audit = CountingAuditLog(Path(tempfile.mkdtemp()))
    app.dependency_overrides[get_audit_log] = lambda: audit
    client.post("/api/ai/evaluate", json={"text": "spam spam"})
    client.post("/api/ai/evaluate", json={"text": "lovely"})

    reads.clear()
    resp = client.get("/api/admin/audit/export", params={"flagged": True}, headers=ADMIN)
    body = resp.json()
    assert body["record_count"] == 1
    assert len(json.loads(body["content"])) == 1
    assert len(reads) == 1
