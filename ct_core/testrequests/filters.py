from __future__ import annotations

import django_filters

from ct_core.testrequests.models import Gender, RequestStatus, TestRequest


class TestRequestFilter(django_filters.FilterSet):
    status = django_filters.ChoiceFilter(choices=RequestStatus.choices)
    gender = django_filters.ChoiceFilter(choices=Gender.choices)
    pin_code = django_filters.NumberFilter()
    created_after = django_filters.DateFilter(field_name="created", lookup_expr="gte")
    created_before = django_filters.DateFilter(field_name="created", lookup_expr="lte")

    class Meta:
        model = TestRequest
        fields = ["status", "gender", "pin_code"]
