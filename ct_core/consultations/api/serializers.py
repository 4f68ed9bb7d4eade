# ct_core/consultations/api/serializers.py
from __future__ import annotations

from rest_framework import serializers

from ct_core.consultations.models import Consultation, DoctorSuggestion


class ConsultationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Consultation
        fields = ["id", "doctor_id", "suggestion", "comments", "updated_on"]
        read_only_fields = fields


class ConsultationInputSerializer(serializers.Serializer):
    # Schema only; validate_consultation_input does the checking.
    suggestion = serializers.ChoiceField(choices=DoctorSuggestion.choices)
    comments = serializers.CharField(required=False, allow_blank=True)
