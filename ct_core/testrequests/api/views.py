# ct_core/testrequests/api/views.py
from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound, ValidationError as DRFValidationError
from rest_framework.response import Response

from ct_core.common.api.pagination import paginate
from ct_core.common.permissions import TestRequestPermission
from ct_core.iam.identity import CurrentUserMixin
from ct_core.testrequests.api.errors import workflow_errors
from ct_core.testrequests.api.serializers import (
    TestRequestCreateSerializer,
    TestRequestFlowSerializer,
    TestRequestSerializer,
)
from ct_core.testrequests.filters import TestRequestFilter
from ct_core.testrequests.selectors import TestRequestSelector
from ct_core.testrequests.services import TestRequestService


class TestRequestViewSet(CurrentUserMixin, viewsets.ViewSet):
    """
    Requester-facing endpoints: raise a request, follow my requests.
    """

    permission_classes = [TestRequestPermission]

    def _get_object(self, request, pk):
        try:
            obj = TestRequestSelector.get_request(request_id=pk)
        except TestRequestSelector.NotFound as exc:
            raise NotFound(f"Invalid ID: no test request with id {pk}") from exc
        self.check_object_permissions(request, obj)
        return obj

    @extend_schema(responses={200: TestRequestSerializer(many=True)}, tags=["Test requests"])
    def list(self, request):
        qs = TestRequestSelector.list_created_by(user=self.current_user(request))

        filterset = TestRequestFilter(request.query_params, queryset=qs)
        if not filterset.is_valid():
            raise DRFValidationError(filterset.errors)

        return paginate(request, filterset.qs, TestRequestSerializer)

    @extend_schema(request=TestRequestCreateSerializer, responses={201: TestRequestSerializer}, tags=["Test requests"])
    def create(self, request):
        ser = TestRequestCreateSerializer(data=request.data or {})
        ser.is_valid(raise_exception=True)

        with workflow_errors():
            test_request = TestRequestService.create_request(user=self.current_user(request), **ser.validated_data)

        return Response(TestRequestSerializer(test_request).data, status=status.HTTP_201_CREATED)

    @extend_schema(responses={200: TestRequestSerializer}, tags=["Test requests"])
    def retrieve(self, request, pk=None):
        return Response(TestRequestSerializer(self._get_object(request, pk)).data, status=status.HTTP_200_OK)

    @extend_schema(responses={200: TestRequestFlowSerializer(many=True)}, tags=["Test requests"])
    @action(detail=True, methods=["get"], url_path="flow")
    def flow(self, request, pk=None):
        test_request = self._get_object(request, pk)
        rows = TestRequestSelector.flow_for(test_request=test_request)
        return Response(TestRequestFlowSerializer(rows, many=True).data, status=status.HTTP_200_OK)
