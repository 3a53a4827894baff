import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Transaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("kind", models.CharField(choices=[("buy", "Buy"), ("sell", "Sell"), ("deposit", "Deposit"), ("withdraw", "Withdraw")], max_length=10)),
                ("coin_symbol", models.CharField(max_length=10)),
                ("amount", models.DecimalField(decimal_places=8, max_digits=28)),
                ("price", models.DecimalField(blank=True, decimal_places=8, max_digits=28, null=True)),
                ("total", models.DecimalField(decimal_places=8, max_digits=28)),
                ("note", models.CharField(blank=True, default="", max_length=255)),
                ("created_at", models.DateTimeField()),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="transactions", to="users.user")),
            ],
            options={
                "ordering": ["-id"],
                "indexes": [models.Index(fields=["user", "-id"], name="ledger_tx_user_id_idx")],
            },
        ),
    ]
