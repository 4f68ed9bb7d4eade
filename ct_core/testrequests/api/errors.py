# ct_core/testrequests/api/errors.py
from __future__ import annotations

from contextlib import contextmanager

from rest_framework.exceptions import NotFound, ValidationError as DRFValidationError

from ct_core.common.api.exceptions import ConflictError
from ct_core.testrequests.exceptions import InvalidStateError, NotFoundError, ValidationError


@contextmanager
def workflow_errors():
    """
    Maps workflow errors to API errors, keeping the original message text:
      NotFoundError -> 404, InvalidStateError -> 409, ValidationError -> 400
    """
    try:
        yield
    except NotFoundError as e:
        raise NotFound(str(e)) from e
    except InvalidStateError as e:
        raise ConflictError(detail=str(e)) from e
    except ValidationError as e:
        raise DRFValidationError({"detail": str(e), **e.errors}) from e
