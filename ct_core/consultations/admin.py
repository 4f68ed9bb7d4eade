from __future__ import annotations

from django.contrib import admin

from ct_core.consultations.models import Consultation


@admin.register(Consultation)
class ConsultationAdmin(admin.ModelAdmin):
    list_display = ("id", "request", "doctor", "suggestion", "updated_on", "created_at")
    list_filter = ("suggestion",)
    search_fields = ("request__id", "doctor__username")
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("request", "doctor")
