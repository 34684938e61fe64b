"""Tests for the export API endpoints."""

import io
import zipfile

import pytest
from fastapi.testclient import TestClient

from propresenter_export.api.dependencies import settings
from propresenter_export.api.main import app
from propresenter_export.config import BIBLE_TRANSLATIONS
from propresenter_export.exceptions import ArchiveAssemblyError

PAYLOAD = {
    "entries": [
        {"type": "event", "title": "Welcome"},
        {"type": "song", "title": "Grace", "content": "Verse\n---\nChorus"},
        {"type": "scripture", "title": "Psalm 23", "content": "1 Der HERR ist mein Hirte"},
    ],
    "translation": "Lutherbibel 2017",
}


@pytest.fixture
def client():
    with TestClient(app) as client:
        yield client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_root_points_to_docs(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_translations(client):
    data = client.get("/export/translations").json()
    assert data["translations"] == BIBLE_TRANSLATIONS
    assert data["default"] == "Lutherbibel 2017"


def test_profiles(client):
    data = client.get("/export/profiles").json()
    assert set(data["profiles"]) == {"pro6", "legacy"}


def test_export_returns_zip_download(client):
    response = client.post("/export/propresenter", json=PAYLOAD)

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    disposition = response.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="ProPresenter_Ablaufplan_')
    assert disposition.endswith('.zip"')

    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        names = zf.namelist()
    assert names[:2] == ["01 - Grace.pro6", "02 - Psalm 23 (Lutherbibel 2017).pro6"]
    assert names[2].startswith("Ablaufplan_") and names[2].endswith(".pro6plx")


def test_export_legacy_profile(client):
    response = client.post("/export/propresenter", json={**PAYLOAD, "profile": "legacy"})
    assert response.status_code == 200
    with zipfile.ZipFile(io.BytesIO(response.content)) as zf:
        assert b"<![CDATA[" in zf.read("01 - Grace.pro6")


def test_export_rejects_loading_entries(client):
    payload = {
        "entries": [{"type": "song", "title": "Grace", "isLoading": True}],
    }
    response = client.post("/export/propresenter", json=payload)
    assert response.status_code == 409
    assert "Grace" in response.json()["detail"]


def test_export_rejects_unknown_profile(client):
    response = client.post("/export/propresenter", json={**PAYLOAD, "profile": "pro7"})
    assert response.status_code == 400


def test_export_rejects_empty_playlist(client):
    response = client.post("/export/propresenter", json={"entries": []})
    assert response.status_code == 400


def test_export_failure_is_single_error(client, monkeypatch):
    def broken_generate(*args, **kwargs):
        raise ArchiveAssemblyError("cannot finalize")

    monkeypatch.setattr(
        "propresenter_export.api.routers.export.generate_archive", broken_generate
    )
    response = client.post("/export/propresenter", json=PAYLOAD)
    assert response.status_code == 500
    assert response.headers["content-type"].startswith("application/json")
    assert response.json()["detail"] == "Failed to create the playlist zip"


def test_request_profile_overrides_bad_default(client, monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_PROFILE", "bogus")

    response = client.post("/export/propresenter", json={**PAYLOAD, "profile": "legacy"})
    assert response.status_code == 200

    response = client.post("/export/propresenter", json=PAYLOAD)
    assert response.status_code == 400
    assert "bogus" in response.json()["detail"]
