from django.db import models
from users.models import User


class TransactionKind(models.TextChoices):
    BUY = "buy"
    SELL = "sell"
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class Transaction(models.Model):
    """One balance-affecting event. Rows are written once and never changed."""

    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name="transactions")
    kind = models.CharField(max_length=10, choices=TransactionKind.choices)
    coin_symbol = models.CharField(max_length=10)
    amount = models.DecimalField(max_digits=28, decimal_places=8)
    price = models.DecimalField(max_digits=28, decimal_places=8, null=True, blank=True)
    total = models.DecimalField(max_digits=28, decimal_places=8)
    note = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField()

    class Meta:
        ordering = ["-id"]
        indexes = [
            models.Index(fields=["user", "-id"], name="ledger_tx_user_id_idx"),
        ]

    def __str__(self):
        return f"#{self.pk} {self.kind} {self.amount} {self.coin_symbol} ({self.user_id})"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Transaction records are append-only")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Transaction records are append-only")
