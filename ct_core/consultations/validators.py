# ct_core/consultations/validators.py
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass

from ct_core.consultations.models import DoctorSuggestion
from ct_core.testrequests.exceptions import ValidationError


@dataclass(frozen=True)
class ConsultationInput:
    suggestion: str | None
    comments: str = ""


def validate_consultation_input(data) -> ConsultationInput:
    """
    `suggestion` is required and must be a known DoctorSuggestion; comments are free text.
    """
    if isinstance(data, ConsultationInput):
        data = asdict(data)
    if not isinstance(data, Mapping):
        raise ValidationError({"non_field_errors": ["Expected an object with consultation fields."]})

    errors: dict[str, list[str]] = {}

    suggestion = data.get("suggestion")
    if suggestion is None or suggestion == "":
        errors["suggestion"] = ["This field may not be null."]
    elif str(suggestion) not in DoctorSuggestion.values:
        errors["suggestion"] = [f'"{suggestion}" is not a valid choice.']

    comments = data.get("comments")
    if comments is not None and not isinstance(comments, str):
        errors["comments"] = ["Not a valid string."]

    if errors:
        raise ValidationError(errors)

    return ConsultationInput(
        suggestion=DoctorSuggestion(str(suggestion)),
        comments=(comments or "").strip(),
    )
