# ct_core/testrequests/services.py

from __future__ import annotations

import logging

from django.db import IntegrityError, transaction
from django.db.models import Q
from django.utils import timezone

from ct_core.testrequests.exceptions import ValidationError
from ct_core.testrequests.models import RequestStatus, TestRequest

logger = logging.getLogger(__name__)


class TestRequestService:
    """
    Write-model operations for test requests outside the status workflow.
    Status changes live in TestRequestWorkflow.
    """

    @staticmethod
    def _open_request_exists(*, email: str, phone_number: str) -> bool:
        return (
            TestRequest.objects.filter(Q(email__iexact=email) | Q(phone_number=phone_number))
            .exclude(status=RequestStatus.COMPLETED)
            .exists()
        )

    @staticmethod
    def _duplicate_error() -> ValidationError:
        return ValidationError(
            {"email": ["An open request already uses this email or phone number."]},
            message="A request with the same email or phone number is already in progress",
        )

    @staticmethod
    @transaction.atomic
    def create_request(
        *,
        user,
        name: str,
        age: int,
        email: str,
        phone_number: str,
        pin_code: int,
        address: str,
        gender: str,
    ) -> TestRequest:
        """
        New requests start INITIATED. One open request per email/phone:
        a second one is rejected until the first is COMPLETED.

        The lookup gives the usual answer; the partial unique constraints on
        TestRequest settle concurrent creates that both pass it.
        """
        if TestRequestService._open_request_exists(email=email, phone_number=phone_number):
            raise TestRequestService._duplicate_error()

        try:
            with transaction.atomic():
                test_request = TestRequest.objects.create(
                    name=name,
                    created=timezone.localdate(),
                    age=age,
                    email=email,
                    phone_number=phone_number,
                    pin_code=pin_code,
                    address=address,
                    gender=gender,
                    status=RequestStatus.INITIATED,
                    created_by=user,
                )
        except IntegrityError as exc:
            raise TestRequestService._duplicate_error() from exc

        logger.info("test request %s created by user %s", test_request.pk, getattr(user, "pk", None))
        return test_request
