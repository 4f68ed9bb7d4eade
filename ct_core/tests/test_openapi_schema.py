import pytest
from rest_framework.test import APIClient

pytestmark = pytest.mark.django_db


def test_schema_lists_versioned_routes_only():
    resp = APIClient().get("/api/schema/", {"format": "json"})

    assert resp.status_code == 200
    paths = resp.json()["paths"]
    assert "/api/v1/lab/requests/{id}/assign/" in paths
    assert "/api/v1/consultations/{id}/update/" in paths
    assert "/api/v1/test-requests/{id}/flow/" in paths
    assert not any(p.startswith("/api/lab/") for p in paths)
