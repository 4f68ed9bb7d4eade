from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


STATUS_CHOICES = [
    ("INITIATED", "Initiated"),
    ("LAB_TEST_IN_PROGRESS", "Lab Test In Progress"),
    ("LAB_TEST_COMPLETED", "Lab Test Completed"),
    ("DIAGNOSIS_IN_PROCESS", "Diagnosis In Process"),
    ("COMPLETED", "Completed"),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="TestRequest",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("created", models.DateField(default=django.utils.timezone.localdate)),
                ("age", models.PositiveIntegerField()),
                ("email", models.EmailField(max_length=254)),
                ("phone_number", models.CharField(max_length=32)),
                ("pin_code", models.PositiveIntegerField()),
                ("address", models.CharField(max_length=512)),
                (
                    "gender",
                    models.CharField(
                        choices=[("MALE", "Male"), ("FEMALE", "Female"), ("OTHER", "Other")],
                        max_length=16,
                    ),
                ),
                (
                    "status",
                    models.CharField(choices=STATUS_CHOICES, db_index=True, default="INITIATED", max_length=32),
                ),
                (
                    "created_by",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="test_requests",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "testrequests_test_request",
            },
        ),
        migrations.CreateModel(
            name="TestRequestFlow",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("from_status", models.CharField(choices=STATUS_CHOICES, max_length=32)),
                ("to_status", models.CharField(choices=STATUS_CHOICES, max_length=32)),
                ("happened_on", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "changed_by",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="test_request_transitions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "request",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="flow",
                        to="testrequests.testrequest",
                    ),
                ),
            ],
            options={
                "db_table": "testrequests_test_request_flow",
                "ordering": ["happened_on", "id"],
            },
        ),
    ]
