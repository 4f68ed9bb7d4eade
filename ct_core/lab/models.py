# ct_core/lab/models.py

from django.conf import settings
from django.db import models

from ct_core.common.models import TimeStampedModel
from ct_core.testrequests.models import TestRequest


class TestStatus(models.TextChoices):
    POSITIVE = "POSITIVE", "Positive"
    NEGATIVE = "NEGATIVE", "Negative"


class LabResult(TimeStampedModel):
    """
    Vitals and outcome recorded by a lab tester.

    Created empty when a tester picks up the request; filled in once by
    update_lab_test and left untouched afterwards.
    """
    request = models.OneToOneField(TestRequest, on_delete=models.CASCADE, related_name="lab_result")
    tester = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="lab_results")

    temperature = models.CharField(max_length=32, blank=True, default="")
    oxygen_level = models.CharField(max_length=32, blank=True, default="")
    heart_beat = models.CharField(max_length=32, blank=True, default="")
    blood_pressure = models.CharField(max_length=32, blank=True, default="")
    comments = models.TextField(blank=True, default="")
    result = models.CharField(max_length=16, choices=TestStatus.choices, null=True, blank=True)

    updated_on = models.DateField(null=True, blank=True)

    class Meta:
        db_table = "lab_result"

    def __str__(self) -> str:
        return f"LabResult({self.request_id}, {self.result})"
