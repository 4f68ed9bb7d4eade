# ct_core/testrequests/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ct_core.consultations.api.serializers import ConsultationSerializer
from ct_core.lab.api.serializers import LabResultSerializer
from ct_core.testrequests.models import Gender, TestRequest, TestRequestFlow


class TestRequestCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    age = serializers.IntegerField(min_value=1, max_value=150)
    email = serializers.EmailField()
    phone_number = serializers.RegexField(r"^\+?[0-9]{6,15}$", max_length=32)
    pin_code = serializers.IntegerField(min_value=100000, max_value=999999)
    address = serializers.CharField(max_length=512)
    gender = serializers.ChoiceField(choices=Gender.choices)


class TestRequestSerializer(serializers.ModelSerializer):
    lab_result = LabResultSerializer(read_only=True, allow_null=True)
    consultation = ConsultationSerializer(read_only=True, allow_null=True)

    class Meta:
        model = TestRequest
        fields = [
            "id",
            "name",
            "created",
            "age",
            "email",
            "phone_number",
            "pin_code",
            "address",
            "gender",
            "status",
            "created_by_id",
            "lab_result",
            "consultation",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields


class TestRequestFlowSerializer(serializers.ModelSerializer):
    changed_by = serializers.SlugRelatedField(slug_field="username", read_only=True)

    class Meta:
        model = TestRequestFlow
        fields = ["id", "from_status", "to_status", "changed_by_id", "changed_by", "happened_on"]
        read_only_fields = fields
