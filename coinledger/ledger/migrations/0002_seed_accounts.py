from decimal import Decimal

from django.conf import settings
from django.contrib.auth.hashers import make_password
from django.db import migrations
from django.utils import timezone

SEED_ACCOUNTS = [
    # name, role, pin setting, starting USDT
    ("demo", "USER", "SEED_DEMO_PIN", Decimal("10000")),
    ("admin", "ADMIN", "SEED_ADMIN_PIN", Decimal("0")),
]


def seed_accounts(apps, schema_editor):
    User = apps.get_model("users", "User")
    Balance = apps.get_model("balances", "Balance")
    Transaction = apps.get_model("ledger", "Transaction")
    now = timezone.now()

    for name, role, pin_setting, usdt in SEED_ACCOUNTS:
        user, created = User.objects.get_or_create(
            name=name,
            defaults={"role": role, "pin": make_password(getattr(settings, pin_setting))},
        )
        if not created:
            continue
        Balance.objects.get_or_create(user=user, coin_symbol="USDT", defaults={"amount": usdt})
        if usdt > 0:
            Transaction.objects.create(
                user=user,
                kind="deposit",
                coin_symbol="USDT",
                amount=usdt,
                price=None,
                total=usdt,
                note="initial balance",
                created_at=now,
            )


class Migration(migrations.Migration):

    dependencies = [
        ("ledger", "0001_initial"),
        ("balances", "0001_initial"),
        ("coins", "0001_initial"),
        ("users", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_accounts, migrations.RunPython.noop),
    ]
