import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_DOWN, ROUND_UP

from django.conf import settings
from django.utils import timezone
from rest_framework.exceptions import ValidationError

from transfers.models import RequestKind, RequestStatus
from .exceptions import AlreadyProcessed, InsufficientFunds, RequestNotFound
from .models import TransactionKind
from .store import LedgerStore

logger = logging.getLogger(__name__)

AMOUNT_PLACES = 8
AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_PLACES)
MAX_INTEGER_DIGITS = 20


def parse_amount(value, field="amount"):
    """Coerce a caller-supplied quantity to a positive Decimal with at most
    eight decimal places, raising ``ValidationError`` otherwise."""
    if value is None or value == "":
        raise ValidationError(f"{field} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number")
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(f"{field} must be a number")
    if not amount.is_finite():
        raise ValidationError(f"{field} must be a number")
    if amount <= 0:
        raise ValidationError(f"{field} must be positive")
    if amount.normalize().as_tuple().exponent < -AMOUNT_PLACES:
        raise ValidationError(f"{field} allows at most {AMOUNT_PLACES} decimal places")
    if amount.adjusted() >= MAX_INTEGER_DIGITS:
        raise ValidationError(f"{field} is too large")
    return amount


def parse_limit(value, default, maximum):
    if value is None or value == "":
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        raise ValidationError("limit must be an integer")
    if limit <= 0:
        raise ValidationError("limit must be positive")
    return min(limit, maximum)


def parse_symbol(value, field="symbol"):
    if not value or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} is required")
    return value.strip().upper()


def parse_kind(value):
    try:
        return RequestKind(value)
    except ValueError:
        raise ValidationError(f"Unknown request kind: {value}")


@dataclass(frozen=True)
class SettlementResult:
    user: str
    kind: str
    symbol: str
    amount: Decimal
    price: Decimal
    total: Decimal
    transaction_id: int


class SettlementEngine:
    """Buy/sell settlement and deposit/withdraw adjudication over a ledger.

    Each operation validates its input, then runs the whole
    check-mutate-append sequence inside one ``store.atomic()`` block: either
    every balance change and the transaction record land, or none do.
    """

    def __init__(self, store=None, clock=None, quote_symbol=None):
        self.store = store or LedgerStore()
        self.clock = clock or timezone.now
        self.quote_symbol = quote_symbol or settings.QUOTE_SYMBOL

    # Queries

    def list_coins(self):
        return self.store.coins()

    def get_balance(self, user, symbol):
        return self.store.balance_amount(user, parse_symbol(symbol))

    def get_balances(self, user):
        return self.store.balances(user)

    def get_transactions(self, user, limit=None):
        limit = parse_limit(limit, settings.TRANSACTION_HISTORY_LIMIT, settings.MAX_LIST_LIMIT)
        return self.store.transactions(user, limit)

    def list_requests(self, kind, user=None, limit=None):
        kind = parse_kind(kind)
        default = settings.TRANSACTION_HISTORY_LIMIT if user is not None else settings.ADMIN_LIST_LIMIT
        limit = parse_limit(limit, default, settings.MAX_LIST_LIMIT)
        return self.store.requests(kind, user=user, limit=limit)

    # Trading

    def buy(self, user, symbol, amount):
        amount = parse_amount(amount)
        symbol = self._trade_symbol(symbol)

        with self.store.atomic():
            coin = self.store.get_coin(symbol)
            cost = (coin.price * amount).quantize(AMOUNT_QUANTUM, rounding=ROUND_UP)
            self._ensure_priced(symbol, cost)
            balances = self.store.lock_balances(user, [self.quote_symbol, symbol])
            quote, asset = balances[self.quote_symbol], balances[symbol]

            if quote.amount < cost:
                logger.warning(f"Buy refused for {user.name}: {amount} {symbol} costs {cost} {self.quote_symbol}, available {quote.amount}")
                raise InsufficientFunds(f"Not enough {self.quote_symbol}")

            quote.amount -= cost
            asset.amount += amount
            self.store.save_balance(quote)
            self.store.save_balance(asset)
            record = self.store.append_transaction(
                user=user,
                kind=TransactionKind.BUY,
                coin_symbol=symbol,
                amount=amount,
                price=coin.price,
                total=cost,
                created_at=self.clock(),
            )

        logger.info(f"Buy settled: {user.name} {amount} {symbol} @ {coin.price} = {cost} {self.quote_symbol} (tx {record.pk})")
        return SettlementResult(user.name, TransactionKind.BUY, symbol, amount, coin.price, cost, record.pk)

    def sell(self, user, symbol, amount):
        amount = parse_amount(amount)
        symbol = self._trade_symbol(symbol)

        with self.store.atomic():
            coin = self.store.get_coin(symbol)
            proceeds = (coin.price * amount).quantize(AMOUNT_QUANTUM, rounding=ROUND_DOWN)
            self._ensure_priced(symbol, proceeds)
            balances = self.store.lock_balances(user, [self.quote_symbol, symbol])
            quote, asset = balances[self.quote_symbol], balances[symbol]

            if asset.amount < amount:
                logger.warning(f"Sell refused for {user.name}: {amount} {symbol} requested, available {asset.amount}")
                raise InsufficientFunds(f"Not enough {symbol}")

            asset.amount -= amount
            quote.amount += proceeds
            self.store.save_balance(asset)
            self.store.save_balance(quote)
            record = self.store.append_transaction(
                user=user,
                kind=TransactionKind.SELL,
                coin_symbol=symbol,
                amount=amount,
                price=coin.price,
                total=proceeds,
                created_at=self.clock(),
            )

        logger.info(f"Sell settled: {user.name} {amount} {symbol} @ {coin.price} = {proceeds} {self.quote_symbol} (tx {record.pk})")
        return SettlementResult(user.name, TransactionKind.SELL, symbol, amount, coin.price, proceeds, record.pk)

    def grant(self, user, symbol, amount, note=""):
        """Credit ``amount`` directly and log it as a deposit, e.g. the signup grant."""
        amount = parse_amount(amount)
        symbol = parse_symbol(symbol)

        with self.store.atomic():
            self.store.get_coin(symbol)
            balance = self.store.lock_balances(user, [symbol])[symbol]
            balance.amount += amount
            self.store.save_balance(balance)
            record = self.store.append_transaction(
                user=user,
                kind=TransactionKind.DEPOSIT,
                coin_symbol=symbol,
                amount=amount,
                price=None,
                total=amount,
                note=note,
                created_at=self.clock(),
            )

        logger.info(f"Granted {amount} {symbol} to {user.name} (tx {record.pk})")
        return record

    # Request queue

    def submit_deposit_request(self, user, symbol, amount):
        return self._submit(RequestKind.DEPOSIT, user, symbol, amount, "")

    def submit_withdraw_request(self, user, symbol, amount, address=""):
        # Funds are not reserved here; a shortfall surfaces at approval.
        return self._submit(RequestKind.WITHDRAW, user, symbol, amount, address or "")

    def approve_deposit(self, request_id, approved_amount, note=""):
        amount = parse_amount(approved_amount, "approved_amount")

        with self.store.atomic():
            request = self._lock_pending(RequestKind.DEPOSIT, request_id)
            balance = self.store.lock_balances(request.user, [request.coin_symbol])[request.coin_symbol]
            balance.amount += amount
            self.store.save_balance(balance)
            record = self._resolve(request, RequestStatus.APPROVED, note, amount, TransactionKind.DEPOSIT)

        logger.info(f"Deposit #{request.pk} approved: +{amount} {request.coin_symbol} for {request.user.name} (tx {record.pk})")
        return request

    def approve_withdraw(self, request_id, approved_amount, note=""):
        amount = parse_amount(approved_amount, "approved_amount")

        with self.store.atomic():
            request = self._lock_pending(RequestKind.WITHDRAW, request_id)
            balance = self.store.lock_balances(request.user, [request.coin_symbol])[request.coin_symbol]
            if balance.amount < amount:
                logger.warning(f"Withdraw #{request.pk} left pending: {amount} {request.coin_symbol} requested, {request.user.name} holds {balance.amount}")
                raise InsufficientFunds("User balance not enough")

            balance.amount -= amount
            self.store.save_balance(balance)
            record = self._resolve(request, RequestStatus.APPROVED, note, amount, TransactionKind.WITHDRAW)

        logger.info(f"Withdraw #{request.pk} approved: -{amount} {request.coin_symbol} for {request.user.name} (tx {record.pk})")
        return request

    def reject_request(self, kind, request_id, note=""):
        kind = parse_kind(kind)

        with self.store.atomic():
            request = self._lock_pending(kind, request_id)
            self._resolve(request, RequestStatus.REJECTED, note)

        logger.info(f"{kind.label} #{request.pk} rejected for {request.user.name}: {note or '-'}")
        return request

    def _submit(self, kind, user, symbol, amount, address):
        amount = parse_amount(amount, "requested_amount")
        symbol = parse_symbol(symbol, "coin_symbol")

        with self.store.atomic():
            self.store.get_coin(symbol)
            request = self.store.create_request(
                kind,
                user=user,
                coin_symbol=symbol,
                requested_amount=amount,
                address=address,
                status=RequestStatus.PENDING,
                created_at=self.clock(),
            )

        logger.info(f"{kind.label} request #{request.pk} submitted: {user.name} {amount} {symbol}")
        return request

    def _lock_pending(self, kind, request_id):
        request = self.store.lock_request(kind, self._request_pk(kind, request_id))
        if not request.is_pending:
            logger.warning(f"{kind.label} #{request.pk} already {request.status}")
            raise AlreadyProcessed(f"{kind.label} request {request.pk} already {request.status}")
        return request

    def _resolve(self, request, status, note, amount=None, tx_kind=None):
        now = self.clock()
        request.status = status
        request.approved_amount = amount
        request.approved_at = now
        request.note = note or ""
        self.store.save_request(request)
        if tx_kind is None:
            return None
        return self.store.append_transaction(
            user=request.user,
            kind=tx_kind,
            coin_symbol=request.coin_symbol,
            amount=amount,
            price=None,
            total=amount,
            note=request.note,
            created_at=now,
        )

    def _request_pk(self, kind, request_id):
        try:
            return int(request_id)
        except (TypeError, ValueError):
            raise RequestNotFound(f"{kind.label} request not found: {request_id}")

    def _ensure_priced(self, symbol, total):
        # A zero total would move one leg without the other
        if total <= 0:
            raise ValidationError(f"Trade value of {symbol} rounds to zero {self.quote_symbol}")

    def _trade_symbol(self, symbol):
        symbol = parse_symbol(symbol)
        if symbol == self.quote_symbol:
            raise ValidationError(f"Cannot trade {self.quote_symbol} against itself")
        return symbol
