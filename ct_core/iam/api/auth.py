# ct_core/iam/api/auth.py

from __future__ import annotations

import logging
from datetime import timedelta

from django.conf import settings
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.serializers import TokenObtainPairSerializer, TokenRefreshSerializer

from ct_core.common.permissions import _user_roles
from ct_core.iam.api.schema_serializers import (
    DetailSerializer,
    LoginRequestSerializer,
    LoginResponseSerializer,
)

logger = logging.getLogger(__name__)


def _jwt_setting(key: str, default):
    return (getattr(settings, "SIMPLE_JWT", {}) or {}).get(key, default)


def _cookie_names() -> tuple[str, str]:
    return _jwt_setting("AUTH_COOKIE", "ct_access"), _jwt_setting("AUTH_COOKIE_REFRESH", "ct_refresh")


def _max_age(key: str, default: timedelta) -> int:
    value = _jwt_setting(key, default)
    if isinstance(value, timedelta):
        return int(value.total_seconds())
    return int(value)


def _set_auth_cookies(response: Response, *, access: str, refresh: str) -> None:
    """
    Both tokens go out as HttpOnly cookies; the access cookie expires with the
    access token so the browser never replays a dead one.
    """
    access_name, refresh_name = _cookie_names()
    common = {
        "httponly": True,
        "secure": bool(_jwt_setting("AUTH_COOKIE_SECURE", False)),
        "samesite": _jwt_setting("AUTH_COOKIE_SAMESITE", "Lax"),
        "path": "/",
    }
    response.set_cookie(
        access_name, access, max_age=_max_age("ACCESS_TOKEN_LIFETIME", timedelta(minutes=10)), **common
    )
    response.set_cookie(
        refresh_name, refresh, max_age=_max_age("REFRESH_TOKEN_LIFETIME", timedelta(days=14)), **common
    )


def _clear_auth_cookies(response: Response) -> None:
    for name in _cookie_names():
        response.delete_cookie(name, path="/")


class LoginView(APIView):
    """Username/password login for citizens, lab testers and doctors."""

    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=LoginRequestSerializer, responses={200: LoginResponseSerializer}, tags=["IAM"])
    def post(self, request):
        serializer = TokenObtainPairSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.user

        logger.info("user %s logged in", user.pk)
        res = Response(
            {"detail": "login ok", "user_id": user.pk, "roles": sorted(_user_roles(user))},
            status=status.HTTP_200_OK,
        )
        _set_auth_cookies(
            res,
            access=serializer.validated_data["access"],
            refresh=serializer.validated_data["refresh"],
        )
        return res


class RefreshView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(request=None, responses={200: DetailSerializer}, tags=["IAM"])
    def post(self, request):
        _, refresh_name = _cookie_names()
        refresh = request.COOKIES.get(refresh_name)

        serializer = TokenRefreshSerializer(data={"refresh": refresh})
        serializer.is_valid(raise_exception=True)

        res = Response({"detail": "refreshed"}, status=status.HTTP_200_OK)
        _set_auth_cookies(
            res,
            access=serializer.validated_data["access"],
            refresh=serializer.validated_data.get("refresh", refresh),
        )
        return res


class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(request=None, responses={200: DetailSerializer}, tags=["IAM"])
    def post(self, request):
        res = Response({"detail": "logged out"}, status=status.HTTP_200_OK)
        _clear_auth_cookies(res)
        return res
