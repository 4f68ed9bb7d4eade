from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("testrequests", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="LabResult",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("temperature", models.CharField(blank=True, default="", max_length=32)),
                ("oxygen_level", models.CharField(blank=True, default="", max_length=32)),
                ("heart_beat", models.CharField(blank=True, default="", max_length=32)),
                ("blood_pressure", models.CharField(blank=True, default="", max_length=32)),
                ("comments", models.TextField(blank=True, default="")),
                (
                    "result",
                    models.CharField(
                        blank=True,
                        choices=[("POSITIVE", "Positive"), ("NEGATIVE", "Negative")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("updated_on", models.DateField(blank=True, null=True)),
                (
                    "request",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="lab_result",
                        to="testrequests.testrequest",
                    ),
                ),
                (
                    "tester",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="lab_results",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "lab_result",
            },
        ),
    ]
