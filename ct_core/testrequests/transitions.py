# ct_core/testrequests/transitions.py
"""
Status transition table for test requests.

Every status has an entry; an operation is legal only from the status that
lists it, and leads to exactly one next status.
"""
from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from ct_core.testrequests.exceptions import InvalidStateError
from ct_core.testrequests.models import RequestStatus

ASSIGN_FOR_LAB_TEST = "assign_for_lab_test"
UPDATE_LAB_TEST = "update_lab_test"
ASSIGN_FOR_CONSULTATION = "assign_for_consultation"
UPDATE_CONSULTATION = "update_consultation"

OPERATIONS = (
    ASSIGN_FOR_LAB_TEST,
    UPDATE_LAB_TEST,
    ASSIGN_FOR_CONSULTATION,
    UPDATE_CONSULTATION,
)

TRANSITIONS: dict[str, dict[str, str]] = {
    RequestStatus.INITIATED: {ASSIGN_FOR_LAB_TEST: RequestStatus.LAB_TEST_IN_PROGRESS},
    RequestStatus.LAB_TEST_IN_PROGRESS: {UPDATE_LAB_TEST: RequestStatus.LAB_TEST_COMPLETED},
    RequestStatus.LAB_TEST_COMPLETED: {ASSIGN_FOR_CONSULTATION: RequestStatus.DIAGNOSIS_IN_PROCESS},
    RequestStatus.DIAGNOSIS_IN_PROCESS: {UPDATE_CONSULTATION: RequestStatus.COMPLETED},
    RequestStatus.COMPLETED: {},
}

_missing = set(RequestStatus.values) - set(TRANSITIONS)
if _missing:
    raise ImproperlyConfigured(f"No transition entry for statuses: {sorted(_missing)}")

_unreachable = set(OPERATIONS) - {op for ops in TRANSITIONS.values() for op in ops}
if _unreachable:
    raise ImproperlyConfigured(f"Operations without a source status: {sorted(_unreachable)}")


def required_status(operation: str) -> str:
    for status, ops in TRANSITIONS.items():
        if operation in ops:
            return status
    raise KeyError(operation)


def allowed_operations(status: str) -> set[str]:
    return set(TRANSITIONS.get(status, {}))


def next_status(current: str, operation: str, *, request_id=None) -> str:
    """
    Returns the status `operation` moves a request to, or raises InvalidStateError.
    """
    target = TRANSITIONS.get(current, {}).get(operation)
    if target is None:
        raise InvalidStateError(
            request_id=request_id,
            current_status=current,
            expected_status=required_status(operation),
        )
    return target
