from __future__ import annotations

from django.contrib import admin

from ct_core.lab.models import LabResult


@admin.register(LabResult)
class LabResultAdmin(admin.ModelAdmin):
    list_display = ("id", "request", "tester", "result", "updated_on", "created_at")
    list_filter = ("result",)
    search_fields = ("request__id", "tester__username")
    readonly_fields = ("created_at", "updated_at")
    list_select_related = ("request", "tester")
