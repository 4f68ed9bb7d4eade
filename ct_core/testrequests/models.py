# ct_core/testrequests/models.py
from django.conf import settings
from django.db import models
from django.db.models import Q
from django.db.models.functions import Lower
from django.utils import timezone

from ct_core.common.models import TimeStampedModel


class Gender(models.TextChoices):
    MALE = "MALE", "Male"
    FEMALE = "FEMALE", "Female"
    OTHER = "OTHER", "Other"


class RequestStatus(models.TextChoices):
    # Declaration order is lifecycle order.
    INITIATED = "INITIATED", "Initiated"
    LAB_TEST_IN_PROGRESS = "LAB_TEST_IN_PROGRESS", "Lab Test In Progress"
    LAB_TEST_COMPLETED = "LAB_TEST_COMPLETED", "Lab Test Completed"
    DIAGNOSIS_IN_PROCESS = "DIAGNOSIS_IN_PROCESS", "Diagnosis In Process"
    COMPLETED = "COMPLETED", "Completed"

    @classmethod
    def rank(cls, value) -> int:
        return cls.values.index(str(value))


class TestRequest(TimeStampedModel):
    """
    A citizen's request for a COVID-19 test.

    Status only moves forward, and only through TestRequestWorkflow.
    The lab result exists from LAB_TEST_IN_PROGRESS onwards and the
    consultation from DIAGNOSIS_IN_PROCESS onwards.
    """
    name = models.CharField(max_length=255)
    created = models.DateField(default=timezone.localdate)
    age = models.PositiveIntegerField()
    email = models.EmailField()
    phone_number = models.CharField(max_length=32)
    pin_code = models.PositiveIntegerField()
    address = models.CharField(max_length=512)
    gender = models.CharField(max_length=16, choices=Gender.choices)

    status = models.CharField(
        max_length=32,
        choices=RequestStatus.choices,
        default=RequestStatus.INITIATED,
        db_index=True,
    )

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="test_requests",
    )

    class Meta:
        db_table = "testrequests_test_request"
        constraints = [
            # One open request per contact; closed requests are history.
            models.UniqueConstraint(
                Lower("email"),
                condition=~Q(status=RequestStatus.COMPLETED),
                name="testrequests_one_open_per_email",
            ),
            models.UniqueConstraint(
                fields=["phone_number"],
                condition=~Q(status=RequestStatus.COMPLETED),
                name="testrequests_one_open_per_phone",
            ),
        ]

    def __str__(self) -> str:
        return f"TestRequest({self.pk}, {self.status})"


class TestRequestFlow(models.Model):
    """
    Immutable history row; one per status transition.
    """
    request = models.ForeignKey(TestRequest, on_delete=models.CASCADE, related_name="flow")
    from_status = models.CharField(max_length=32, choices=RequestStatus.choices)
    to_status = models.CharField(max_length=32, choices=RequestStatus.choices)
    changed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="test_request_transitions",
        null=True,
        blank=True,
    )
    happened_on = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        db_table = "testrequests_test_request_flow"
        ordering = ["happened_on", "id"]

    def __str__(self) -> str:
        return f"{self.request_id}: {self.from_status} -> {self.to_status}"
