# ct_core/lab/validators.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from ct_core.lab.models import LabResult, TestStatus
from ct_core.testrequests.exceptions import ValidationError

VITAL_FIELDS = ("temperature", "oxygen_level", "heart_beat", "blood_pressure", "comments")


@dataclass(frozen=True)
class LabResultInput:
    temperature: str
    oxygen_level: str
    heart_beat: str
    blood_pressure: str
    comments: str
    result: str | None


def validate_lab_result_input(data) -> LabResultInput:
    """
    Checks a lab result payload and returns it cleaned.

    Every vital must be a non-blank value that fits its LabResult column, and
    `result` one of POSITIVE/NEGATIVE.
    All failing fields are reported together.
    """
    if isinstance(data, LabResultInput):
        data = asdict(data)
    if not isinstance(data, Mapping):
        raise ValidationError({"non_field_errors": ["Expected an object with lab result fields."]})

    errors: dict[str, list[str]] = {}
    cleaned: dict[str, str] = {}

    for field in VITAL_FIELDS:
        value = data.get(field)
        text = "" if value is None else str(value).strip()
        max_length = LabResult._meta.get_field(field).max_length
        if not text:
            errors[field] = ["This field may not be blank."]
        elif max_length is not None and len(text) > max_length:
            errors[field] = [f"Ensure this field has no more than {max_length} characters."]
        else:
            cleaned[field] = text

    result = data.get("result")
    if result is None or result == "":
        errors["result"] = ["This field may not be null."]
    elif str(result) not in TestStatus.values:
        errors["result"] = [f'"{result}" is not a valid choice.']

    if errors:
        raise ValidationError(errors)

    return LabResultInput(result=TestStatus(str(result)), **cleaned)
