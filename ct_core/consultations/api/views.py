# ct_core/consultations/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from ct_core.common.api.pagination import paginate
from ct_core.common.permissions import ConsultationPermission
from ct_core.consultations.api.serializers import ConsultationInputSerializer
from ct_core.iam.identity import CurrentUserMixin
from ct_core.testrequests.api.errors import workflow_errors
from ct_core.testrequests.api.serializers import TestRequestSerializer
from ct_core.testrequests.selectors import TestRequestSelector
from ct_core.testrequests.workflow import TestRequestWorkflow


class ConsultationViewSet(CurrentUserMixin, viewsets.ViewSet):
    """
    Doctor adapter over TestRequestWorkflow.
    """

    permission_classes = [ConsultationPermission]
    workflow_class = TestRequestWorkflow

    def get_workflow(self) -> TestRequestWorkflow:
        return self.workflow_class()

    @extend_schema(responses={200: TestRequestSerializer(many=True)}, tags=["Consultations"])
    def list(self, request):
        doctor = self.current_user(request)
        return paginate(request, TestRequestSelector.list_for_doctor(doctor=doctor), TestRequestSerializer)

    @extend_schema(responses={200: TestRequestSerializer(many=True)}, tags=["Consultations"])
    @action(detail=False, methods=["get"], url_path="in-queue")
    def in_queue(self, request):
        return paginate(request, TestRequestSelector.waiting_for_doctor(), TestRequestSerializer)

    @extend_schema(request=None, responses={200: TestRequestSerializer}, tags=["Consultations"])
    @action(detail=True, methods=["put"], url_path="assign")
    def assign(self, request, pk=None):
        doctor = self.current_user(request)
        with workflow_errors():
            test_request = self.get_workflow().assign_for_consultation(pk, doctor)
        return Response(TestRequestSerializer(test_request).data, status=status.HTTP_200_OK)

    @extend_schema(request=ConsultationInputSerializer, responses={200: TestRequestSerializer}, tags=["Consultations"])
    @action(detail=True, methods=["put"], url_path="update")
    def update_consultation(self, request, pk=None):
        doctor = self.current_user(request)
        with workflow_errors():
            test_request = self.get_workflow().update_consultation(pk, request.data, doctor)
        return Response(TestRequestSerializer(test_request).data, status=status.HTTP_200_OK)
