import pytest
from django.contrib.auth import get_user_model

from ct_core.conftest import LAB_RESULT_OK, client_for
from ct_core.testrequests.models import RequestStatus, TestRequest

pytestmark = pytest.mark.django_db


def test_to_be_tested_lists_initiated_requests(tester_client, make_test_request):
    waiting = make_test_request()
    make_test_request(RequestStatus.LAB_TEST_IN_PROGRESS)

    resp = tester_client.get("/api/v1/lab/requests/to-be-tested/")

    assert resp.status_code == 200
    assert resp.data["count"] == 1
    assert resp.data["results"][0]["id"] == waiting.id
    assert resp.data["results"][0]["lab_result"] is None


def test_assign_then_update(tester_client, tester, make_test_request):
    tr = make_test_request()

    resp = tester_client.put(f"/api/v1/lab/requests/{tr.id}/assign/", {}, format="json")
    assert resp.status_code == 200
    assert resp.data["status"] == RequestStatus.LAB_TEST_IN_PROGRESS
    assert resp.data["lab_result"]["tester_id"] == tester.id

    resp = tester_client.put(f"/api/v1/lab/requests/{tr.id}/update/", LAB_RESULT_OK, format="json")
    assert resp.status_code == 200
    assert resp.data["status"] == RequestStatus.LAB_TEST_COMPLETED
    assert resp.data["lab_result"]["result"] == "NEGATIVE"
    assert resp.data["lab_result"]["heart_beat"] == "72"

    resp = tester_client.get("/api/v1/lab/requests/")
    assert [r["id"] for r in resp.data["results"]] == [tr.id]


def test_assign_unknown_id_returns_404_envelope(tester_client):
    resp = tester_client.put("/api/v1/lab/requests/-34/assign/", {}, format="json")

    assert resp.status_code == 404
    err = resp.json()["error"]
    assert err["code"] == "not_found"
    assert "Invalid ID" in err["message"]
    assert err["request_id"]


def test_assign_twice_returns_409(tester_client, make_test_request):
    tr = make_test_request(RequestStatus.LAB_TEST_IN_PROGRESS)

    resp = tester_client.put(f"/api/v1/lab/requests/{tr.id}/assign/", {}, format="json")

    assert resp.status_code == 409
    err = resp.json()["error"]
    assert err["code"] == "conflict"
    assert "Invalid ID or State" in err["message"]
    assert "LAB_TEST_IN_PROGRESS" in err["message"]


def test_update_with_missing_fields_returns_400(tester_client, make_test_request):
    tr = make_test_request(RequestStatus.LAB_TEST_IN_PROGRESS)

    resp = tester_client.put(
        f"/api/v1/lab/requests/{tr.id}/update/",
        {**LAB_RESULT_OK, "result": None, "temperature": ""},
        format="json",
    )

    assert resp.status_code == 400
    err = resp.json()["error"]
    assert err["code"] == "validation_error"
    assert err["message"].startswith("Invalid input")
    assert set(err["details"]) == {"result", "temperature"}
    assert TestRequest.objects.get(pk=tr.pk).status == RequestStatus.LAB_TEST_IN_PROGRESS


def test_non_testers_are_forbidden(citizen_client, doctor_client, make_test_request):
    tr = make_test_request()

    for client in (citizen_client, doctor_client):
        assert client.get("/api/v1/lab/requests/to-be-tested/").status_code == 403
        resp = client.put(f"/api/v1/lab/requests/{tr.id}/assign/", {}, format="json")
        assert resp.status_code == 403
        assert resp.json()["error"]["code"] == "permission_denied"

    assert TestRequest.objects.get(pk=tr.pk).status == RequestStatus.INITIATED


def test_unversioned_alias(tester_client, make_test_request):
    make_test_request()

    resp = tester_client.get("/api/lab/requests/to-be-tested/")

    assert resp.status_code == 200
    assert resp.data["count"] == 1


def test_superuser_acts_as_admin(make_test_request):
    admin = get_user_model().objects.create_superuser(username="root", password="pass123", email="root@example.com")
    tr = make_test_request()

    resp = client_for(admin).put(f"/api/v1/lab/requests/{tr.id}/assign/", {}, format="json")

    assert resp.status_code == 200
    assert resp.data["lab_result"]["tester_id"] == admin.id


def test_update_with_oversized_vital_returns_400(tester_client, make_test_request):
    tr = make_test_request(RequestStatus.LAB_TEST_IN_PROGRESS)

    resp = tester_client.put(
        f"/api/v1/lab/requests/{tr.id}/update/",
        {**LAB_RESULT_OK, "temperature": "9" * 100},
        format="json",
    )

    assert resp.status_code == 400
    assert resp.json()["error"]["details"] == {"temperature": ["Ensure this field has no more than 32 characters."]}
    assert TestRequest.objects.get(pk=tr.pk).lab_result.temperature == ""
