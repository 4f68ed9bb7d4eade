# ct_core/testrequests/exceptions.py
from __future__ import annotations


class WorkflowError(Exception):
    """Base class for errors raised at the workflow boundary."""


class NotFoundError(WorkflowError):
    def __init__(self, request_id=None, message: str | None = None):
        self.request_id = request_id
        super().__init__(message or f"Invalid ID: no test request with id {request_id}")


class InvalidStateError(WorkflowError):
    def __init__(self, *, request_id=None, current_status=None, expected_status=None, message: str | None = None):
        self.request_id = request_id
        self.current_status = current_status
        self.expected_status = expected_status
        super().__init__(
            message
            or (
                f"Invalid ID or State: test request {request_id} is {current_status}, "
                f"operation requires {expected_status}"
            )
        )


class ValidationError(WorkflowError):
    """
    Field-level input failure. `errors` maps every failing field to its messages.
    """

    def __init__(self, errors: dict[str, list[str]], message: str | None = None):
        self.errors = errors
        super().__init__(message or "Invalid input: " + ", ".join(sorted(errors)))
