import logging
from contextlib import contextmanager
from decimal import Decimal

from django.db import DEFAULT_DB_ALIAS, DatabaseError, transaction

from balances.models import Balance
from coins.models import Coin
from transfers.models import REQUEST_MODELS
from .exceptions import CoinNotFound, PersistenceFailure, RequestNotFound
from .models import Transaction

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


class LedgerStore:
    """ORM-backed persistence for the price catalog, balances, the
    transaction log and the transfer request queues.

    Every mutating engine operation runs inside :meth:`atomic`; rows read
    for a check-then-write sequence are fetched with ``select_for_update``
    so concurrent operations on the same balance or request serialize.
    """

    def __init__(self, using=DEFAULT_DB_ALIAS):
        self.using = using

    @contextmanager
    def atomic(self):
        try:
            with transaction.atomic(using=self.using):
                yield
        except DatabaseError as exc:
            logger.error(f"Ledger transaction rolled back: {exc}")
            raise PersistenceFailure() from exc

    # Price catalog

    def coins(self):
        return list(Coin.objects.using(self.using).order_by("symbol"))

    def get_coin(self, symbol):
        try:
            return Coin.objects.using(self.using).get(symbol=symbol)
        except Coin.DoesNotExist:
            raise CoinNotFound(f"Coin not found: {symbol}")

    # Balances

    def balance_amount(self, user, symbol):
        amount = (
            Balance.objects.using(self.using)
            .filter(user=user, coin_symbol=symbol)
            .values_list("amount", flat=True)
            .first()
        )
        return ZERO if amount is None else amount

    def balances(self, user):
        return list(Balance.objects.using(self.using).filter(user=user).order_by("coin_symbol"))

    def lock_balances(self, user, symbols):
        """Lock (creating at zero where missing) the user's rows for ``symbols``.

        Rows are always locked in symbol order.
        """
        locked = {}
        for symbol in sorted(set(symbols)):
            balance, created = (
                Balance.objects.using(self.using)
                .select_for_update()
                .get_or_create(user=user, coin_symbol=symbol, defaults={"amount": ZERO})
            )
            if created:
                logger.info(f"New balance row for user {user.name}, coin {symbol}")
            locked[symbol] = balance
        return locked

    def save_balance(self, balance):
        balance.save(using=self.using, update_fields=["amount"])

    # Transaction log

    def append_transaction(self, **fields):
        return Transaction.objects.using(self.using).create(**fields)

    def transactions(self, user, limit):
        return list(Transaction.objects.using(self.using).filter(user=user).order_by("-id")[:limit])

    # Request queues

    def create_request(self, kind, **fields):
        return REQUEST_MODELS[kind].objects.using(self.using).create(**fields)

    def lock_request(self, kind, request_id):
        model = REQUEST_MODELS[kind]
        try:
            return (
                model.objects.using(self.using)
                .select_for_update(of=("self",))
                .select_related("user")
                .get(pk=request_id)
            )
        except model.DoesNotExist:
            raise RequestNotFound(f"{kind.label} request not found: {request_id}")

    def save_request(self, request):
        request.save(using=self.using, update_fields=["status", "approved_amount", "approved_at", "note"])

    def requests(self, kind, user=None, limit=None):
        qs = REQUEST_MODELS[kind].objects.using(self.using).select_related("user")
        if user is not None:
            qs = qs.filter(user=user)
        return list(qs.order_by("-id")[:limit])
