import pytest
from django.test import RequestFactory
from rest_framework.exceptions import NotAuthenticated
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from ct_core.iam import identity

pytestmark = pytest.mark.django_db


def test_me_requires_auth():
    res = APIClient().get("/api/me/")

    assert res.status_code in (401, 403)
    assert res.json()["error"]["code"] == "not_authenticated"


def test_login_sets_cookies(tester, settings):
    res = APIClient().post("/api/auth/login/", {"username": "tester", "password": "pass123"}, format="json")

    assert res.status_code == 200
    assert settings.SIMPLE_JWT["AUTH_COOKIE"] in res.cookies
    assert settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"] in res.cookies
    assert res.json()["roles"] == ["TESTER"]
    assert res.json()["user_id"] == tester.id


def test_refresh_reads_refresh_cookie(tester, settings):
    client = APIClient()
    client.cookies[settings.SIMPLE_JWT["AUTH_COOKIE_REFRESH"]] = str(RefreshToken.for_user(tester))

    res = client.post("/api/auth/refresh/")

    assert res.status_code == 200
    assert res.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]].value


def test_refresh_without_cookie_is_rejected():
    res = APIClient().post("/api/auth/refresh/")

    assert res.status_code == 400


def test_login_with_wrong_password(tester):
    res = APIClient().post("/api/auth/login/", {"username": "tester", "password": "nope"}, format="json")

    assert res.status_code == 401


def test_cookie_token_authenticates(tester, settings):
    client = APIClient()
    client.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]] = str(RefreshToken.for_user(tester).access_token)

    res = client.get("/api/v1/me/")

    assert res.status_code == 200
    assert res.json()["user"]["username"] == "tester"


def test_bearer_token_authenticates(doctor):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {RefreshToken.for_user(doctor).access_token}")

    res = client.get("/api/v1/me/")

    assert res.status_code == 200
    assert res.json()["roles"] == ["DOCTOR"]


def test_me_for_plain_user(citizen_client, citizen):
    body = citizen_client.get("/api/me/").json()

    assert body["user"]["id"] == citizen.id
    assert body["roles"] == ["USER"]


def test_logout_clears_cookies(tester_client, settings):
    res = tester_client.post("/api/auth/logout/")

    assert res.status_code == 200
    assert res.cookies[settings.SIMPLE_JWT["AUTH_COOKIE"]].value == ""


def test_request_user_rejects_anonymous():
    request = RequestFactory().get("/")

    with pytest.raises(NotAuthenticated):
        identity.request_user(request)


def test_current_user_provider_is_configurable(settings, monkeypatch, doctor):
    monkeypatch.setattr(identity, "fixed_actor", lambda request: doctor, raising=False)
    settings.CURRENT_USER_PROVIDER = "ct_core.iam.identity.fixed_actor"

    assert identity.CurrentUserMixin().current_user(RequestFactory().get("/")) == doctor
