from django.apps import AppConfig


class TestRequestsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ct_core.testrequests"
    label = "testrequests"
    verbose_name = "Test requests"
