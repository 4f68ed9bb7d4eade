# ct_core/consultations/models.py

from django.conf import settings
from django.db import models

from ct_core.common.models import TimeStampedModel
from ct_core.testrequests.models import TestRequest


class DoctorSuggestion(models.TextChoices):
    NO_ISSUES = "NO_ISSUES", "No Issues"
    HOME_QUARANTINE = "HOME_QUARANTINE", "Home Quarantine"
    ADMIT = "ADMIT", "Admit"


class Consultation(TimeStampedModel):
    """
    Doctor's closing note on a tested request.
    """
    request = models.OneToOneField(TestRequest, on_delete=models.CASCADE, related_name="consultation")
    doctor = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.PROTECT, related_name="consultations")

    suggestion = models.CharField(max_length=32, choices=DoctorSuggestion.choices, null=True, blank=True)
    comments = models.TextField(blank=True, default="")

    updated_on = models.DateField(null=True, blank=True)

    class Meta:
        db_table = "consultations_consultation"

    def __str__(self) -> str:
        return f"Consultation({self.request_id}, {self.suggestion})"
