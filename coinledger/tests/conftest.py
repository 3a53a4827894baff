"""Shared fixtures: users with balances, an engine, authenticated API clients."""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from balances.models import Balance
from ledger.engine import SettlementEngine
from users.models import User


@pytest.fixture(autouse=True)
def fast_pin_hashing(settings):
    # MD5 for speed; PBKDF2 stays listed so migration-seeded pins still verify
    settings.PASSWORD_HASHERS = [
        "django.contrib.auth.hashers.MD5PasswordHasher",
        "django.contrib.auth.hashers.PBKDF2PasswordHasher",
    ]


@pytest.fixture
def engine(db) -> SettlementEngine:
    return SettlementEngine()


@pytest.fixture
def make_user(db):
    def _make(name, pin="1234", role="USER", **balances):
        user = User(name=name, role=role)
        user.set_pin(pin)
        user.save()
        for symbol, amount in balances.items():
            Balance.objects.create(user=user, coin_symbol=symbol, amount=Decimal(amount))
        return user

    return _make


@pytest.fixture
def alice(make_user) -> User:
    return make_user("alice", USDT="10000")


@pytest.fixture
def bob(make_user) -> User:
    return make_user("bob", USDT="50")


@pytest.fixture
def root(make_user) -> User:
    return make_user("root", pin="rootpin", role="ADMIN")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def alice_client(alice) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_X_USER="alice", HTTP_X_PIN="1234")
    return client


@pytest.fixture
def admin_client(root) -> APIClient:
    client = APIClient()
    client.credentials(HTTP_X_USER="root", HTTP_X_PIN="rootpin")
    return client
