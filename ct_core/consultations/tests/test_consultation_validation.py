import pytest

from ct_core.consultations.models import DoctorSuggestion
from ct_core.consultations.validators import ConsultationInput, validate_consultation_input
from ct_core.testrequests.exceptions import ValidationError


def test_suggestion_is_required():
    with pytest.raises(ValidationError) as exc:
        validate_consultation_input(ConsultationInput(suggestion=None))

    assert exc.value.errors == {"suggestion": ["This field may not be null."]}


def test_unknown_suggestion():
    with pytest.raises(ValidationError) as exc:
        validate_consultation_input({"suggestion": "SURGERY"})

    assert exc.value.errors["suggestion"] == ['"SURGERY" is not a valid choice.']


def test_comments_must_be_text():
    with pytest.raises(ValidationError) as exc:
        validate_consultation_input({"suggestion": "ADMIT", "comments": 42})

    assert set(exc.value.errors) == {"comments"}


def test_comments_are_optional():
    data = validate_consultation_input({"suggestion": "HOME_QUARANTINE"})

    assert data.suggestion == DoctorSuggestion.HOME_QUARANTINE
    assert data.comments == ""
