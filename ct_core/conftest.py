# ct_core/conftest.py
import itertools

import pytest
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from rest_framework.test import APIClient

from ct_core.consultations.models import DoctorSuggestion
from ct_core.lab.models import TestStatus
from ct_core.testrequests.models import RequestStatus
from ct_core.testrequests.services import TestRequestService
from ct_core.testrequests.workflow import TestRequestWorkflow

_seq = itertools.count(1)


def make_user(username: str, role: str | None = None):
    User = get_user_model()
    user = User.objects.create_user(username=username, password="pass123", email=f"{username}@example.com")
    if role:
        group, _ = Group.objects.get_or_create(name=role)
        user.groups.add(group)
    return user


def client_for(user) -> APIClient:
    c = APIClient()
    c.force_authenticate(user=user)
    return c


def request_payload(**overrides):
    n = next(_seq)
    data = {
        "name": f"Citizen {n}",
        "age": 34,
        "email": f"citizen{n}@example.com",
        "phone_number": f"98450{n:05d}",
        "pin_code": 560001,
        "address": "12 MG Road, Bengaluru",
        "gender": "FEMALE",
    }
    data.update(overrides)
    return data


LAB_RESULT_OK = {
    "temperature": "98.6",
    "oxygen_level": "97",
    "heart_beat": "72",
    "blood_pressure": "120/80",
    "comments": "No symptoms",
    "result": TestStatus.NEGATIVE,
}

CONSULTATION_OK = {
    "suggestion": DoctorSuggestion.NO_ISSUES,
    "comments": "All good",
}


@pytest.fixture
def citizen(db):
    return make_user("citizen")


@pytest.fixture
def tester(db):
    return make_user("tester", "TESTER")


@pytest.fixture
def doctor(db):
    return make_user("doctor", "DOCTOR")


@pytest.fixture
def citizen_client(citizen):
    return client_for(citizen)


@pytest.fixture
def tester_client(tester):
    return client_for(tester)


@pytest.fixture
def doctor_client(doctor):
    return client_for(doctor)


@pytest.fixture
def workflow():
    return TestRequestWorkflow()


@pytest.fixture
def make_test_request(citizen, tester, doctor, workflow):
    """
    Creates a request and walks it forward through the workflow until it
    reaches `status`.
    """

    def _make(status=RequestStatus.INITIATED, **overrides):
        test_request = TestRequestService.create_request(user=citizen, **request_payload(**overrides))
        target = RequestStatus.rank(status)

        steps = [
            lambda: workflow.assign_for_lab_test(test_request.id, tester),
            lambda: workflow.update_lab_test(test_request.id, LAB_RESULT_OK, tester),
            lambda: workflow.assign_for_consultation(test_request.id, doctor),
            lambda: workflow.update_consultation(test_request.id, CONSULTATION_OK, doctor),
        ]
        for step in steps[:target]:
            step()

        test_request.refresh_from_db()
        return test_request

    return _make
