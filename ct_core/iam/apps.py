from django.apps import AppConfig


class IamConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "ct_core.iam"

    def ready(self) -> None:
        # registers the OpenAPI auth scheme extension
        from ct_core.iam import openapi  # noqa: F401
