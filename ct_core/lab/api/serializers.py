# ct_core/lab/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ct_core.lab.models import LabResult, TestStatus


class LabResultSerializer(serializers.ModelSerializer):
    class Meta:
        model = LabResult
        fields = [
            "id",
            "tester_id",
            "temperature",
            "oxygen_level",
            "heart_beat",
            "blood_pressure",
            "comments",
            "result",
            "updated_on",
        ]
        read_only_fields = fields


class LabResultInputSerializer(serializers.Serializer):
    """
    Request body contract for the OpenAPI schema; validation itself is
    validate_lab_result_input so the workflow reports all failing fields.
    """
    temperature = serializers.CharField()
    oxygen_level = serializers.CharField()
    heart_beat = serializers.CharField()
    blood_pressure = serializers.CharField()
    comments = serializers.CharField()
    result = serializers.ChoiceField(choices=TestStatus.choices)
