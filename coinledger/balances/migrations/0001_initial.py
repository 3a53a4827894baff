import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Balance",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("coin_symbol", models.CharField(max_length=10)),
                ("amount", models.DecimalField(decimal_places=8, default=0, max_digits=28)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="balances", to="users.user")),
            ],
            options={
                "ordering": ["coin_symbol"],
                "unique_together": {("user", "coin_symbol")},
                "constraints": [
                    models.CheckConstraint(condition=models.Q(amount__gte=0), name="balance_amount_non_negative"),
                ],
            },
        ),
    ]
