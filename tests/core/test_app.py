"""
Envelope, error handling and health endpoints
"""

from vidhost.core.errors import (
    ApiError,
    AuthorizationError,
    NotFoundError,
    UploadError,
    ValidationError,
    error_envelope,
)
from vidhost.services.pagination import Page


def test_error_status_codes():
    assert ValidationError().status_code == 400
    assert AuthorizationError().status_code == 403
    assert NotFoundError().status_code == 404
    assert UploadError().status_code == 400
    assert isinstance(UploadError("x"), ApiError)


def test_error_envelope_shape():
    assert error_envelope(404, "Video not found") == {
        "statusCode": 404,
        "data": None,
        "message": "Video not found",
        "success": False,
        "errors": [],
    }


def test_page_counters_on_last_page():
    page = Page(items=["a"], total=5, page=3, limit=2)

    assert page.total_pages == 3
    assert page.paging_counter == 5
    assert page.has_next_page is False
    assert page.next_page is None
    assert page.prev_page == 2


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert "message" in response.json()


def test_health_does_not_need_auth(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/api/v1/health/").json() == {"status": "healthy"}


def test_detailed_health_checks_database(client):
    response = client.get("/api/v1/health/detailed")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}
