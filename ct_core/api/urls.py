# ct_core/api/urls.py
from __future__ import annotations

from django.urls import path
from rest_framework.routers import DefaultRouter

from ct_core.consultations.api.views import ConsultationViewSet
from ct_core.iam.api.auth import LoginView, LogoutView, RefreshView
from ct_core.iam.api.me import MeView
from ct_core.lab.api.views import LabRequestViewSet
from ct_core.testrequests.api.views import TestRequestViewSet

router = DefaultRouter()

router.register(r"test-requests", TestRequestViewSet, basename="test-requests")
router.register(r"lab/requests", LabRequestViewSet, basename="lab-requests")
router.register(r"consultations", ConsultationViewSet, basename="consultations")

urlpatterns = [
    # Auth + /me
    path("auth/login/", LoginView.as_view(), name="login"),
    path("auth/refresh/", RefreshView.as_view(), name="refresh"),
    path("auth/logout/", LogoutView.as_view(), name="logout"),
    path("me/", MeView.as_view(), name="me"),

    # Router URLs last (so explicit paths win if ever overlapping)
    *router.urls,
]
