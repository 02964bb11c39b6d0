"""
API tests for the CV upload endpoint
"""
import pytest
from fastapi.testclient import TestClient

from cvparser.cv.upload_service import upload_service
from cvparser.main import app
from tests.conftest import static_extractor

UPLOAD_URL = "/api/v1/cv/upload"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def extracted_text(monkeypatch):
    """Point the shared upload service at a canned extraction result"""
    def use(text: str):
        monkeypatch.setattr(upload_service.parser, "extractor", static_extractor(text))
    return use


def pdf_file(content: bytes = b"%PDF-1.4 test", content_type: str = "application/pdf"):
    return {"file": ("cv.pdf", content, content_type)}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_upload_returns_camel_case_data(client, extracted_text, sample_cv):
    extracted_text(sample_cv)

    response = client.post(UPLOAD_URL, files=pdf_file())

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["warnings"] is None

    data = body["data"]
    assert data["skills"][0] == "JavaScript"
    first_job = data["workHistory"][0]
    assert first_job["company"] == "Tech Company"
    assert first_job["startDate"] == "January 2020"
    assert first_job["endDate"] is None
    assert data["education"][0]["field"] == "Computer Science"


def test_upload_without_file(client):
    response = client.post(UPLOAD_URL)

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "NO_FILE"


def test_upload_wrong_type(client):
    response = client.post(UPLOAD_URL, files=pdf_file(b"plain text", "text/plain"))

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INVALID_FILE_TYPE"
    assert error["type"] == "InvalidFileTypeError"


def test_upload_scanned_document(client, extracted_text):
    extracted_text("Page 1")

    response = client.post(UPLOAD_URL, files=pdf_file())

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "INSUFFICIENT_DATA"
    assert error["details"]["text_length"] == 6


def test_correlation_id_is_echoed(client):
    response = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"
