"""Overlapping settlements on one balance, each from its own connection."""

import threading
from decimal import Decimal

import pytest
from django.db import connection

from ledger.engine import SettlementEngine
from ledger.exceptions import InsufficientFunds, PersistenceFailure
from ledger.models import Transaction

pytestmark = pytest.mark.django_db(transaction=True, serialized_rollback=True)


def run_together(*calls):
    """Start every call at once on its own thread; collect outcomes by index."""
    barrier = threading.Barrier(len(calls))
    outcomes = [None] * len(calls)

    def worker(index, call):
        try:
            barrier.wait()
            call()
            outcomes[index] = "ok"
        except Exception as exc:
            outcomes[index] = exc
        finally:
            connection.close()

    threads = [threading.Thread(target=worker, args=(i, call)) for i, call in enumerate(calls)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)
    return outcomes


def test_overlapping_withdraw_approvals_never_overdraw(make_user):
    grace = make_user("grace", USDT="100")
    engine = SettlementEngine()
    first = engine.submit_withdraw_request(grace, "USDT", "60")
    second = engine.submit_withdraw_request(grace, "USDT", "60")

    outcomes = run_together(
        lambda: SettlementEngine().approve_withdraw(first.pk, "60"),
        lambda: SettlementEngine().approve_withdraw(second.pk, "60"),
    )

    assert outcomes.count("ok") == 1
    refused = [o for o in outcomes if o != "ok"]
    assert isinstance(refused[0], (InsufficientFunds, PersistenceFailure))
    assert engine.get_balance(grace, "USDT") == Decimal("40")
    assert Transaction.objects.filter(user=grace, kind="withdraw").count() == 1


def test_overlapping_sells_never_oversell(make_user):
    heidi = make_user("heidi", USDT="0", SOL="3")

    outcomes = run_together(
        lambda: SettlementEngine().sell(heidi, "SOL", "2"),
        lambda: SettlementEngine().sell(heidi, "SOL", "2"),
    )

    engine = SettlementEngine()
    assert outcomes.count("ok") == 1
    refused = [o for o in outcomes if o != "ok"]
    assert isinstance(refused[0], (InsufficientFunds, PersistenceFailure))
    assert engine.get_balance(heidi, "SOL") == Decimal("1")
    assert engine.get_balance(heidi, "USDT") == Decimal("200")
    assert Transaction.objects.filter(user=heidi, kind="sell").count() == 1
