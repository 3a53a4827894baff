from decimal import Decimal

import django.core.validators
from django.db import migrations, models

DEFAULT_COINS = {
    "BTC": Decimal("50000"),
    "ETH": Decimal("2500"),
    "BNB": Decimal("300"),
    "SOL": Decimal("100"),
    "USDT": Decimal("1"),
}


def seed_coins(apps, schema_editor):
    Coin = apps.get_model("coins", "Coin")
    for symbol, price in DEFAULT_COINS.items():
        Coin.objects.get_or_create(symbol=symbol, defaults={"price": price})


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Coin",
            fields=[
                ("symbol", models.CharField(max_length=10, primary_key=True, serialize=False, validators=[django.core.validators.RegexValidator("^[A-Z]{2,10}$", "Symbol must be 2-10 uppercase letters")])),
                ("price", models.DecimalField(decimal_places=8, max_digits=28, validators=[django.core.validators.MinValueValidator(0)])),
            ],
            options={
                "ordering": ["symbol"],
            },
        ),
        migrations.RunPython(seed_coins, migrations.RunPython.noop),
    ]
