# ct_core/lab/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from ct_core.common.api.pagination import paginate
from ct_core.common.permissions import LabPermission
from ct_core.iam.identity import CurrentUserMixin
from ct_core.lab.api.serializers import LabResultInputSerializer
from ct_core.testrequests.api.errors import workflow_errors
from ct_core.testrequests.api.serializers import TestRequestSerializer
from ct_core.testrequests.selectors import TestRequestSelector
from ct_core.testrequests.workflow import TestRequestWorkflow


class LabRequestViewSet(CurrentUserMixin, viewsets.ViewSet):
    """
    Lab tester adapter over TestRequestWorkflow:
    - resolves the acting tester
    - maps workflow errors to API errors
    """

    permission_classes = [LabPermission]
    workflow_class = TestRequestWorkflow

    def get_workflow(self) -> TestRequestWorkflow:
        return self.workflow_class()

    # ----------------------------
    # Reads
    # ----------------------------
    @extend_schema(responses={200: TestRequestSerializer(many=True)}, tags=["Lab"])
    def list(self, request):
        tester = self.current_user(request)
        return paginate(request, TestRequestSelector.list_for_tester(tester=tester), TestRequestSerializer)

    @extend_schema(responses={200: TestRequestSerializer(many=True)}, tags=["Lab"])
    @action(detail=False, methods=["get"], url_path="to-be-tested")
    def to_be_tested(self, request):
        return paginate(request, TestRequestSelector.waiting_for_lab(), TestRequestSerializer)

    # ----------------------------
    # Workflow actions
    # ----------------------------
    @extend_schema(request=None, responses={200: TestRequestSerializer}, tags=["Lab"])
    @action(detail=True, methods=["put"], url_path="assign")
    def assign(self, request, pk=None):
        tester = self.current_user(request)
        with workflow_errors():
            test_request = self.get_workflow().assign_for_lab_test(pk, tester)
        return Response(TestRequestSerializer(test_request).data, status=status.HTTP_200_OK)

    @extend_schema(request=LabResultInputSerializer, responses={200: TestRequestSerializer}, tags=["Lab"])
    @action(detail=True, methods=["put"], url_path="update")
    def update_result(self, request, pk=None):
        tester = self.current_user(request)
        with workflow_errors():
            test_request = self.get_workflow().update_lab_test(pk, request.data, tester)
        return Response(TestRequestSerializer(test_request).data, status=status.HTTP_200_OK)
