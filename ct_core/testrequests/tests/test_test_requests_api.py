import pytest

from ct_core.conftest import client_for, make_user, request_payload
from ct_core.testrequests.models import RequestStatus, TestRequest

pytestmark = pytest.mark.django_db


def test_create_request(citizen_client, citizen):
    resp = citizen_client.post("/api/v1/test-requests/", request_payload(name="Ravi"), format="json")

    assert resp.status_code == 201
    assert resp.data["status"] == RequestStatus.INITIATED
    assert resp.data["created_by_id"] == citizen.id
    assert resp.data["lab_result"] is None
    assert resp.data["consultation"] is None


def test_create_request_field_validation(citizen_client):
    resp = citizen_client.post(
        "/api/v1/test-requests/",
        request_payload(age=0, phone_number="12ab", gender="UNKNOWN"),
        format="json",
    )

    assert resp.status_code == 400
    err = resp.json()["error"]
    assert err["code"] == "validation_error"
    assert {"age", "phone_number", "gender"} <= set(err["details"])
    assert not TestRequest.objects.exists()


def test_create_duplicate_open_request(citizen_client):
    payload = request_payload()
    assert citizen_client.post("/api/v1/test-requests/", payload, format="json").status_code == 201

    resp = citizen_client.post("/api/v1/test-requests/", payload, format="json")

    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "A request with the same email or phone number is already in progress"


def test_list_only_my_requests_with_filters(citizen_client, make_test_request):
    initiated = make_test_request()
    make_test_request(RequestStatus.COMPLETED)
    other = make_user("neighbour")
    client_for(other).post("/api/v1/test-requests/", request_payload(), format="json")

    resp = citizen_client.get("/api/v1/test-requests/")
    assert resp.status_code == 200
    assert resp.data["count"] == 2

    resp = citizen_client.get("/api/v1/test-requests/", {"status": "INITIATED"})
    assert [r["id"] for r in resp.data["results"]] == [initiated.id]


def test_list_with_invalid_filter(citizen_client):
    resp = citizen_client.get("/api/v1/test-requests/", {"status": "BOGUS"})

    assert resp.status_code == 400
    assert "status" in resp.json()["error"]["details"]


def test_retrieve_and_flow_for_owner(citizen_client, make_test_request):
    tr = make_test_request(RequestStatus.LAB_TEST_COMPLETED)

    resp = citizen_client.get(f"/api/v1/test-requests/{tr.id}/")
    assert resp.status_code == 200
    assert resp.data["lab_result"]["result"] == "NEGATIVE"

    resp = citizen_client.get(f"/api/v1/test-requests/{tr.id}/flow/")
    assert resp.status_code == 200
    assert [(r["from_status"], r["to_status"]) for r in resp.data] == [
        ("INITIATED", "LAB_TEST_IN_PROGRESS"),
        ("LAB_TEST_IN_PROGRESS", "LAB_TEST_COMPLETED"),
    ]
    assert resp.data[0]["changed_by"] == "tester"


def test_staff_can_read_any_request(tester_client, make_test_request):
    tr = make_test_request()

    assert tester_client.get(f"/api/v1/test-requests/{tr.id}/").status_code == 200


def test_other_citizens_cannot_read(make_test_request):
    tr = make_test_request()
    stranger = client_for(make_user("stranger"))

    resp = stranger.get(f"/api/v1/test-requests/{tr.id}/")

    assert resp.status_code == 403


def test_retrieve_unknown_id(citizen_client):
    resp = citizen_client.get("/api/v1/test-requests/-34/")

    assert resp.status_code == 404
    assert "Invalid ID" in resp.json()["error"]["message"]
