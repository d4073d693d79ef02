"""Tests for the FastAPI service mode."""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from docfreq.config import DocFreqConfig, UploadConfig
from docfreq.ingestion import DocumentIngestor
from docfreq.service import create_app
from docfreq.stores import AnalysisStore
from tests._fixtures.pdf import FakePdfExtractor


@pytest.fixture
def client(store: AnalysisStore) -> TestClient:
    return TestClient(create_app(store=store))


def _upload(client: TestClient, content: bytes, media_type: str):
    return client.post(
        "/api/upload",
        files={"file": ("document", content, media_type)},
    )


def test_health_endpoint(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_upload_then_fetch_analysis(client: TestClient) -> None:
    response = _upload(client, b"The cat sat on the mat. THE CAT ran.", "text/plain")
    assert response.status_code == 200
    identifier = response.json()["id"]

    response = client.get(f"/api/analysis/{identifier}")
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == identifier
    assert data["frequencies"][:2] == [
        {"word": "the", "frequency": 3},
        {"word": "cat", "frequency": 2},
    ]
    assert len(data["frequencies"]) == 6


def test_upload_rejects_unsupported_media_type(
    client: TestClient, store: AnalysisStore
) -> None:
    response = _upload(client, b"{}", "application/json")

    assert response.status_code == 400
    assert "Unsupported media type" in response.json()["detail"]
    assert len(store) == 0


def test_upload_requires_file_field(client: TestClient) -> None:
    response = client.post("/api/upload", data={"other": "value"})

    assert response.status_code == 400
    assert response.json() == {"detail": "Error retrieving file"}


def test_upload_rejects_files_over_limit(store: AnalysisStore, tmp_path: Path) -> None:
    config = DocFreqConfig(root=tmp_path, upload=UploadConfig(max_bytes=8))
    client = TestClient(create_app(config, store=store))

    response = _upload(client, b"far too many bytes", "text/plain")

    assert response.status_code == 400
    assert response.json() == {"detail": "File too large"}
    assert len(store) == 0


def test_upload_reports_malformed_pdf(client: TestClient) -> None:
    response = _upload(client, b"not a pdf at all", "application/pdf")

    assert response.status_code == 422


def test_upload_pdf_uses_injected_extractor(store: AnalysisStore) -> None:
    ingestor = DocumentIngestor(
        store, pdf_extractor=FakePdfExtractor(["page one ", "page two"])
    )
    client = TestClient(create_app(ingestor=ingestor))

    response = _upload(client, b"%PDF", "application/pdf")

    assert response.status_code == 200
    analysis = store.get(response.json()["id"])
    assert analysis.frequencies[0].word == "page"
    assert analysis.frequencies[0].frequency == 2


def test_unknown_analysis_returns_404(client: TestClient) -> None:
    response = client.get("/api/analysis/nonexistent-id")

    assert response.status_code == 404
    assert response.json() == {"detail": "Analysis not found"}


def test_empty_upload_produces_empty_frequencies(client: TestClient) -> None:
    identifier = _upload(client, b"", "text/plain").json()["id"]

    response = client.get(f"/api/analysis/{identifier}")
    assert response.json() == {"id": identifier, "frequencies": []}


def test_app_shares_one_store_across_requests(client: TestClient) -> None:
    first = _upload(client, b"alpha", "text/plain").json()["id"]
    second = _upload(client, b"alpha", "text/plain").json()["id"]

    assert first != second
    assert client.app.state.store is client.app.state.ingestor.store
    assert len(client.app.state.store) == 2
