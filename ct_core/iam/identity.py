# ct_core/iam/identity.py
"""
Resolution of the acting user for workflow endpoints.

Views never read identity from module state; they ask the configured
provider (settings.CURRENT_USER_PROVIDER, a dotted path to a callable
taking the request). Tests and alternative front-ends can swap it.
"""
from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string
from rest_framework.exceptions import NotAuthenticated

DEFAULT_PROVIDER = "ct_core.iam.identity.request_user"


def request_user(request):
    user = getattr(request, "user", None)
    if user is None or not getattr(user, "is_authenticated", False):
        raise NotAuthenticated()
    return user


def get_current_user_provider():
    return import_string(getattr(settings, "CURRENT_USER_PROVIDER", DEFAULT_PROVIDER))


class CurrentUserMixin:
    def current_user(self, request):
        return get_current_user_provider()(request)
