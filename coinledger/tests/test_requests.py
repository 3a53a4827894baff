"""Deposit/withdraw request lifecycle: submit, approve, reject."""

from decimal import Decimal

import pytest
from rest_framework.exceptions import ValidationError

from ledger.exceptions import AlreadyProcessed, CoinNotFound, InsufficientFunds, RequestNotFound
from ledger.models import Transaction
from transfers.models import DepositRequest, RequestKind, RequestStatus, WithdrawRequest

pytestmark = pytest.mark.django_db


class TestSubmission:

    def test_deposit_request_is_pending_without_balance_effect(self, engine, alice):
        deposit = engine.submit_deposit_request(alice, "USDT", "500")

        assert deposit.status == RequestStatus.PENDING
        assert deposit.approved_amount is None
        assert deposit.approved_at is None
        assert deposit.address == ""
        assert engine.get_balance(alice, "USDT") == Decimal("10000")
        assert not Transaction.objects.filter(user=alice).exists()

    def test_withdraw_request_keeps_address(self, engine, alice):
        withdraw = engine.submit_withdraw_request(alice, "USDT", "100", address="T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb")

        assert withdraw.status == RequestStatus.PENDING
        assert withdraw.address == "T9yD14Nj9j7xAB4dbGeiX9h8unkKHxuWwb"
        assert engine.get_balance(alice, "USDT") == Decimal("10000")

    def test_submission_validates_amount_and_coin(self, engine, alice):
        with pytest.raises(ValidationError):
            engine.submit_deposit_request(alice, "USDT", "-5")
        with pytest.raises(CoinNotFound):
            engine.submit_withdraw_request(alice, "XYZ", "1")
        assert not WithdrawRequest.objects.exists()

    def test_list_requests_scoped_to_user(self, engine, alice, bob):
        first = engine.submit_deposit_request(alice, "USDT", "1")
        engine.submit_deposit_request(bob, "USDT", "2")
        last = engine.submit_deposit_request(alice, "BTC", "3")

        mine = engine.list_requests(RequestKind.DEPOSIT, user=alice)
        assert [r.pk for r in mine] == [last.pk, first.pk]
        assert len(engine.list_requests("deposit")) == 3
        assert engine.list_requests("withdraw") == []

    def test_list_requests_unknown_kind(self, engine):
        with pytest.raises(ValidationError):
            engine.list_requests("transfer")


class TestDepositApproval:

    def test_approval_credits_balance_once(self, engine, make_user):
        carol = make_user("carol")
        deposit = engine.submit_deposit_request(carol, "USDT", "500")

        approved = engine.approve_deposit(deposit.pk, "500", note="bank ref 42")

        assert approved.status == RequestStatus.APPROVED
        assert approved.approved_amount == Decimal("500")
        assert approved.approved_at is not None
        assert approved.note == "bank ref 42"
        assert engine.get_balance(carol, "USDT") == Decimal("500")

        record = Transaction.objects.get(user=carol)
        assert (record.kind, record.price, record.total) == ("deposit", None, Decimal("500"))

        with pytest.raises(AlreadyProcessed):
            engine.approve_deposit(deposit.pk, "500")
        assert engine.get_balance(carol, "USDT") == Decimal("500")
        assert Transaction.objects.filter(user=carol).count() == 1

    def test_approved_amount_may_differ(self, engine, alice):
        deposit = engine.submit_deposit_request(alice, "ETH", "2")
        engine.approve_deposit(deposit.pk, "1.25")

        assert engine.get_balance(alice, "ETH") == Decimal("1.25")
        assert DepositRequest.objects.get(pk=deposit.pk).requested_amount == Decimal("2")

    def test_unknown_request(self, engine):
        with pytest.raises(RequestNotFound):
            engine.approve_deposit(999999, "1")
        with pytest.raises(RequestNotFound):
            engine.approve_deposit("not-an-id", "1")

    def test_approved_amount_required(self, engine, alice):
        deposit = engine.submit_deposit_request(alice, "USDT", "1")
        with pytest.raises(ValidationError):
            engine.approve_deposit(deposit.pk, None)
        assert DepositRequest.objects.get(pk=deposit.pk).status == RequestStatus.PENDING


class TestWithdrawApproval:

    def test_shortfall_leaves_request_pending(self, engine, bob):
        withdraw = engine.submit_withdraw_request(bob, "USDT", "100")

        with pytest.raises(InsufficientFunds):
            engine.approve_withdraw(withdraw.pk, "100")

        withdraw.refresh_from_db()
        assert withdraw.status == RequestStatus.PENDING
        assert withdraw.approved_amount is None
        assert engine.get_balance(bob, "USDT") == Decimal("50")
        assert not Transaction.objects.filter(user=bob).exists()

    def test_approval_debits_balance(self, engine, alice):
        withdraw = engine.submit_withdraw_request(alice, "USDT", "2500", address="addr")
        engine.approve_withdraw(withdraw.pk, "2500")

        assert engine.get_balance(alice, "USDT") == Decimal("7500")
        record = Transaction.objects.get(user=alice)
        assert (record.kind, record.total) == ("withdraw", Decimal("2500"))

    def test_over_committed_requests_caught_at_approval(self, engine, bob):
        first = engine.submit_withdraw_request(bob, "USDT", "30")
        second = engine.submit_withdraw_request(bob, "USDT", "30")

        engine.approve_withdraw(first.pk, "30")
        with pytest.raises(InsufficientFunds):
            engine.approve_withdraw(second.pk, "30")

        assert engine.get_balance(bob, "USDT") == Decimal("20")
        second.refresh_from_db()
        assert second.status == RequestStatus.PENDING

    def test_second_approval_is_refused(self, engine, alice):
        withdraw = engine.submit_withdraw_request(alice, "USDT", "10")
        engine.approve_withdraw(withdraw.pk, "10")

        with pytest.raises(AlreadyProcessed):
            engine.approve_withdraw(withdraw.pk, "10")
        assert engine.get_balance(alice, "USDT") == Decimal("9990")

    def test_deposit_id_is_not_a_withdraw_id(self, engine, alice):
        deposit = engine.submit_deposit_request(alice, "USDT", "10")
        assert not WithdrawRequest.objects.filter(pk=deposit.pk).exists()
        with pytest.raises(RequestNotFound):
            engine.approve_withdraw(deposit.pk, "10")


class TestRejection:

    def test_reject_has_no_balance_effect(self, engine, alice):
        withdraw = engine.submit_withdraw_request(alice, "USDT", "10")

        rejected = engine.reject_request(RequestKind.WITHDRAW, withdraw.pk, note="address blacklisted")

        assert rejected.status == RequestStatus.REJECTED
        assert rejected.approved_amount is None
        assert rejected.note == "address blacklisted"
        assert engine.get_balance(alice, "USDT") == Decimal("10000")
        assert not Transaction.objects.filter(user=alice).exists()

    def test_rejected_request_is_terminal(self, engine, alice):
        deposit = engine.submit_deposit_request(alice, "USDT", "10")
        engine.reject_request("deposit", deposit.pk)

        with pytest.raises(AlreadyProcessed):
            engine.approve_deposit(deposit.pk, "10")
        with pytest.raises(AlreadyProcessed):
            engine.reject_request("deposit", deposit.pk)
        assert engine.get_balance(alice, "USDT") == Decimal("10000")

    def test_reject_unknown(self, engine):
        with pytest.raises(RequestNotFound):
            engine.reject_request("withdraw", 424242)
