# ct_core/common/api/exceptions.py

from __future__ import annotations

import logging
import uuid
from typing import Any

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)

GENERIC_MESSAGE = "Request failed."


def ensure_request_id(request) -> str:
    """
    Returns request.request_id, generating it on first use.
    Middleware and the exception handler share the same id this way.
    """
    if request is None:
        return uuid.uuid4().hex
    rid = getattr(request, "request_id", None)
    if not rid:
        rid = uuid.uuid4().hex
        request.request_id = rid
    return rid


def build_error_envelope(*, request=None, code: str, message: str, details: Any = None) -> dict[str, Any]:
    """
    Every API error body:

        {"error": {"code": ..., "message": ..., "details": ..., "request_id": ...}}
    """
    return {
        "error": {
            "code": code,
            "message": message,
            "details": details,
            "request_id": ensure_request_id(request),
        }
    }


class ConflictError(APIException):
    """
    409 for operations the resource's current state does not allow,
    e.g. assigning a lab test to a request that is already with a tester.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"

    def __init__(self, detail=None, code=None):
        super().__init__(detail=detail or self.default_detail, code=code or self.default_code)


def _error_code(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "validation_error"
    if isinstance(exc, APIException):
        return exc.default_code or "api_error"
    if isinstance(exc, Http404):
        return "not_found"
    if isinstance(exc, DjangoPermissionDenied):
        return "permission_denied"
    return "error"


def _split_detail(data) -> tuple[str, Any]:
    """
    {"detail": "x"}             -> ("x", None)
    {"detail": "x", "f": [...]} -> ("x", {"f": [...]})
    anything else               -> (GENERIC_MESSAGE, data)
    """
    if not isinstance(data, dict) or "detail" not in data:
        return GENERIC_MESSAGE, data

    message = data["detail"]
    if isinstance(message, list) and len(message) == 1:
        message = message[0]
    rest = {k: v for k, v in data.items() if k != "detail"}
    return str(message), rest or None


def api_exception_handler(exc: Exception, context: dict[str, Any]):
    request = context.get("request")
    response = drf_exception_handler(exc, context)

    if response is None:
        logger.exception("unhandled error", exc_info=exc)
        return Response(
            build_error_envelope(request=request, code="server_error", message="Unexpected server error."),
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    message, details = _split_detail(response.data)
    return Response(
        build_error_envelope(request=request, code=_error_code(exc), message=message, details=details),
        status=response.status_code,
        headers=response.headers,
    )
