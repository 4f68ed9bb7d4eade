# ct_core/common/spectacular_hooks.py
from __future__ import annotations

VERSIONED_PREFIX = "/api/v1/"


def preprocess_exclude_legacy_api(endpoints):
    """
    config/urls.py mounts ct_core.api.urls under /api/v1/ and again under
    /api/. Document the versioned copy only, otherwise every operation shows
    up twice with suffixed operationIds.
    """
    return [
        endpoint
        for endpoint in endpoints
        if endpoint[0].startswith(VERSIONED_PREFIX) or not endpoint[0].startswith("/api/")
    ]
