from django.db import migrations, models
import django.db.models.functions.text


class Migration(migrations.Migration):

    dependencies = [
        ("testrequests", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="testrequest",
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower("email"),
                condition=models.Q(("status", "COMPLETED"), _negated=True),
                name="testrequests_one_open_per_email",
            ),
        ),
        migrations.AddConstraint(
            model_name="testrequest",
            constraint=models.UniqueConstraint(
                condition=models.Q(("status", "COMPLETED"), _negated=True),
                fields=("phone_number",),
                name="testrequests_one_open_per_phone",
            ),
        ),
    ]
