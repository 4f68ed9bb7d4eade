# ct_core/testrequests/selectors.py
from __future__ import annotations

from django.db.models import QuerySet

from ct_core.testrequests.models import RequestStatus, TestRequest, TestRequestFlow


class TestRequestSelector:
    class NotFound(Exception):
        pass

    @staticmethod
    def _base() -> QuerySet[TestRequest]:
        return TestRequest.objects.select_related("lab_result", "consultation").order_by("-created_at", "-id")

    @staticmethod
    def get_request(*, request_id) -> TestRequest:
        try:
            return TestRequestSelector._base().get(pk=request_id)
        except (TestRequest.DoesNotExist, ValueError, TypeError) as exc:
            raise TestRequestSelector.NotFound() from exc

    @staticmethod
    def list_by_status(*, status: str) -> QuerySet[TestRequest]:
        return TestRequestSelector._base().filter(status=status)

    @staticmethod
    def list_created_by(*, user) -> QuerySet[TestRequest]:
        return TestRequestSelector._base().filter(created_by=user)

    @staticmethod
    def list_for_tester(*, tester) -> QuerySet[TestRequest]:
        return TestRequestSelector._base().filter(lab_result__tester=tester)

    @staticmethod
    def list_for_doctor(*, doctor) -> QuerySet[TestRequest]:
        return TestRequestSelector._base().filter(consultation__doctor=doctor)

    @staticmethod
    def waiting_for_lab() -> QuerySet[TestRequest]:
        return TestRequestSelector.list_by_status(status=RequestStatus.INITIATED)

    @staticmethod
    def waiting_for_doctor() -> QuerySet[TestRequest]:
        return TestRequestSelector.list_by_status(status=RequestStatus.LAB_TEST_COMPLETED)

    @staticmethod
    def flow_for(*, test_request: TestRequest) -> QuerySet[TestRequestFlow]:
        return TestRequestFlow.objects.filter(request=test_request).select_related("changed_by")
