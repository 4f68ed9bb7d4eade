# ct_core/testrequests/workflow.py

from __future__ import annotations

import logging
from typing import Any

from django.db import transaction
from django.utils import timezone

from ct_core.consultations.models import Consultation
from ct_core.consultations.validators import ConsultationInput, validate_consultation_input
from ct_core.lab.models import LabResult
from ct_core.lab.validators import LabResultInput, validate_lab_result_input
from ct_core.testrequests import transitions
from ct_core.testrequests.exceptions import InvalidStateError, NotFoundError, WorkflowError
from ct_core.testrequests.models import TestRequest, TestRequestFlow

logger = logging.getLogger(__name__)


class DjangoTestRequestStore:
    """
    All workflow persistence, backed by the Django ORM: the request row, its
    LabResult / Consultation sub-records and the flow history.

    Must be used inside transaction.atomic: rows are locked on read and the
    status write is guarded by the status that was read.
    """

    # -------------------------
    # Test request
    # -------------------------
    def find_request_by_id(self, request_id) -> TestRequest:
        try:
            return TestRequest.objects.select_for_update().get(pk=request_id)
        except (TestRequest.DoesNotExist, ValueError, TypeError) as exc:
            raise NotFoundError(request_id) from exc

    def save_transition(self, test_request: TestRequest, from_status: str, to_status: str, actor) -> TestRequest:
        now = timezone.now()
        updated = TestRequest.objects.filter(pk=test_request.pk, status=from_status).update(
            status=to_status,
            updated_at=now,
        )
        if updated != 1:
            # Someone else moved the request since we read it.
            raise InvalidStateError(
                request_id=test_request.pk,
                current_status=TestRequest.objects.filter(pk=test_request.pk).values_list("status", flat=True).first(),
                expected_status=from_status,
            )

        TestRequestFlow.objects.create(
            request=test_request,
            from_status=from_status,
            to_status=to_status,
            changed_by=actor,
        )

        test_request.status = to_status
        test_request.updated_at = now
        return test_request

    # -------------------------
    # Sub-records
    # -------------------------
    def create_lab_result(self, test_request: TestRequest, tester) -> LabResult:
        return LabResult.objects.create(request=test_request, tester=tester)

    def record_lab_result(self, test_request: TestRequest, data: LabResultInput) -> LabResult | None:
        """Fills in the request's LabResult; None when it has none."""
        lab_result = LabResult.objects.select_for_update().filter(request=test_request).first()
        if lab_result is None:
            return None

        lab_result.temperature = data.temperature
        lab_result.oxygen_level = data.oxygen_level
        lab_result.heart_beat = data.heart_beat
        lab_result.blood_pressure = data.blood_pressure
        lab_result.comments = data.comments
        lab_result.result = data.result
        lab_result.updated_on = timezone.localdate()
        lab_result.save()
        return lab_result

    def create_consultation(self, test_request: TestRequest, doctor) -> Consultation:
        return Consultation.objects.create(request=test_request, doctor=doctor)

    def record_consultation(self, test_request: TestRequest, data: ConsultationInput) -> Consultation | None:
        consultation = Consultation.objects.select_for_update().filter(request=test_request).first()
        if consultation is None:
            return None

        consultation.suggestion = data.suggestion
        consultation.comments = data.comments
        consultation.updated_on = timezone.localdate()
        consultation.save()
        return consultation


class TestRequestWorkflow:
    """
    Guarded status transitions for a test request.

    INITIATED -> LAB_TEST_IN_PROGRESS -> LAB_TEST_COMPLETED
              -> DIAGNOSIS_IN_PROCESS -> COMPLETED

    Each operation reads the current status, checks it against the transition
    table, then applies one forward transition and one sub-record change
    atomically, or raises without side effects:
    - NotFoundError: unknown request id
    - InvalidStateError: request not in the status the operation requires
    - ValidationError: lab result / consultation input failed field checks

    Every read and write goes through `store` (DjangoTestRequestStore by
    default). The transaction boundary is always the default database's
    transaction.atomic.
    """

    def __init__(self, store: Any = None):
        self.store = store or DjangoTestRequestStore()

    # -------------------------
    # Internal helpers
    # -------------------------
    def _load(self, request_id, operation: str) -> tuple[TestRequest, str, str]:
        test_request = self.store.find_request_by_id(request_id)
        from_status = test_request.status
        to_status = transitions.next_status(from_status, operation, request_id=test_request.pk)
        return test_request, from_status, to_status

    def _commit(self, test_request: TestRequest, from_status: str, to_status: str, actor, operation: str) -> TestRequest:
        test_request = self.store.save_transition(test_request, from_status, to_status, actor)
        logger.info(
            "test request %s: %s %s -> %s by user %s",
            test_request.pk,
            operation,
            from_status,
            to_status,
            getattr(actor, "pk", None),
        )
        return test_request

    def _run(self, operation: str, request_id, step) -> TestRequest:
        try:
            with transaction.atomic():
                return step()
        except WorkflowError as exc:
            logger.warning("test request %s: %s rejected: %s", request_id, operation, exc)
            raise

    @staticmethod
    def _missing(test_request: TestRequest, status: str, what: str) -> InvalidStateError:
        return InvalidStateError(
            request_id=test_request.pk,
            current_status=status,
            expected_status=status,
            message=f"Invalid ID or State: test request {test_request.pk} has no {what} to update",
        )

    # -------------------------
    # Lab testing
    # -------------------------
    def assign_for_lab_test(self, request_id, tester) -> TestRequest:
        def step():
            test_request, from_status, to_status = self._load(request_id, transitions.ASSIGN_FOR_LAB_TEST)
            self.store.create_lab_result(test_request, tester)
            return self._commit(test_request, from_status, to_status, tester, transitions.ASSIGN_FOR_LAB_TEST)

        return self._run(transitions.ASSIGN_FOR_LAB_TEST, request_id, step)

    def update_lab_test(self, request_id, lab_result_input, tester) -> TestRequest:
        def step():
            data = validate_lab_result_input(lab_result_input)
            test_request, from_status, to_status = self._load(request_id, transitions.UPDATE_LAB_TEST)
            if self.store.record_lab_result(test_request, data) is None:
                raise self._missing(test_request, from_status, "lab result")
            return self._commit(test_request, from_status, to_status, tester, transitions.UPDATE_LAB_TEST)

        return self._run(transitions.UPDATE_LAB_TEST, request_id, step)

    # -------------------------
    # Doctor consultation
    # -------------------------
    def assign_for_consultation(self, request_id, doctor) -> TestRequest:
        def step():
            test_request, from_status, to_status = self._load(request_id, transitions.ASSIGN_FOR_CONSULTATION)
            self.store.create_consultation(test_request, doctor)
            return self._commit(test_request, from_status, to_status, doctor, transitions.ASSIGN_FOR_CONSULTATION)

        return self._run(transitions.ASSIGN_FOR_CONSULTATION, request_id, step)

    def update_consultation(self, request_id, consultation_input, doctor) -> TestRequest:
        def step():
            data = validate_consultation_input(consultation_input)
            test_request, from_status, to_status = self._load(request_id, transitions.UPDATE_CONSULTATION)
            if self.store.record_consultation(test_request, data) is None:
                raise self._missing(test_request, from_status, "consultation")
            return self._commit(test_request, from_status, to_status, doctor, transitions.UPDATE_CONSULTATION)

        return self._run(transitions.UPDATE_CONSULTATION, request_id, step)
