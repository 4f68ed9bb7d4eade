from __future__ import annotations

from django.utils.deprecation import MiddlewareMixin

from ct_core.common.api.exceptions import ensure_request_id


class RequestIdMiddleware(MiddlewareMixin):
    """
    Attaches a request_id to every request and echoes it back as X-Request-Id.

    A client-supplied X-Request-Id is reused so callers can correlate logs;
    otherwise a fresh id is generated. The error envelope reads the same id.
    """

    META_KEY = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-Id"

    def process_request(self, request):
        incoming = (request.META.get(self.META_KEY) or "").strip()
        if incoming:
            request.request_id = incoming[:64]
        else:
            ensure_request_id(request)
        return None

    def process_response(self, request, response):
        rid = getattr(request, "request_id", None)
        if rid:
            response[self.RESPONSE_HEADER] = rid
        return response
