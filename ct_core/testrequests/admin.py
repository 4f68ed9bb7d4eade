from __future__ import annotations

from django.contrib import admin

from ct_core.testrequests.models import TestRequest, TestRequestFlow


@admin.register(TestRequest)
class TestRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "email", "phone_number", "pin_code", "status", "created", "created_by")
    list_filter = ("status", "gender")
    search_fields = ("id", "name", "email", "phone_number")
    ordering = ("-created_at",)
    readonly_fields = ("status", "created_at", "updated_at")
    list_select_related = ("created_by",)


@admin.register(TestRequestFlow)
class TestRequestFlowAdmin(admin.ModelAdmin):
    list_display = ("id", "request", "from_status", "to_status", "changed_by", "happened_on")
    list_filter = ("to_status",)
    search_fields = ("request__id",)

    def has_add_permission(self, request):
        # history rows are written by TestRequestWorkflow only
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
