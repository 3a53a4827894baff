import django.db.models.deletion
from django.db import migrations, models

STATUS_CHOICES = [("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")]


def request_fields():
    return [
        ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
        ("coin_symbol", models.CharField(max_length=10)),
        ("requested_amount", models.DecimalField(decimal_places=8, max_digits=28)),
        ("approved_amount", models.DecimalField(blank=True, decimal_places=8, max_digits=28, null=True)),
        ("address", models.CharField(blank=True, default="", max_length=255)),
        ("status", models.CharField(choices=STATUS_CHOICES, default="pending", max_length=10)),
        ("note", models.CharField(blank=True, default="", max_length=255)),
        ("created_at", models.DateTimeField()),
        ("approved_at", models.DateTimeField(blank=True, null=True)),
        ("user", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, to="users.user")),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="DepositRequest",
            fields=request_fields(),
            options={
                "ordering": ["-id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="WithdrawRequest",
            fields=request_fields(),
            options={
                "ordering": ["-id"],
                "abstract": False,
            },
        ),
    ]
