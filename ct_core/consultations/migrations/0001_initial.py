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
            name="Consultation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "suggestion",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("NO_ISSUES", "No Issues"),
                            ("HOME_QUARANTINE", "Home Quarantine"),
                            ("ADMIT", "Admit"),
                        ],
                        max_length=32,
                        null=True,
                    ),
                ),
                ("comments", models.TextField(blank=True, default="")),
                ("updated_on", models.DateField(blank=True, null=True)),
                (
                    "doctor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="consultations",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "request",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="consultation",
                        to="testrequests.testrequest",
                    ),
                ),
            ],
            options={
                "db_table": "consultations_consultation",
            },
        ),
    ]
