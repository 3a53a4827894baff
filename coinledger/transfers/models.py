from django.db import models
from users.models import User


class RequestStatus(models.TextChoices):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class RequestKind(models.TextChoices):
    DEPOSIT = "deposit"
    WITHDRAW = "withdraw"


class BaseTransferRequest(models.Model):
    user = models.ForeignKey(User, on_delete=models.PROTECT)
    coin_symbol = models.CharField(max_length=10)
    requested_amount = models.DecimalField(max_digits=28, decimal_places=8)
    approved_amount = models.DecimalField(max_digits=28, decimal_places=8, null=True, blank=True)
    address = models.CharField(max_length=255, blank=True, default="")
    status = models.CharField(max_length=10, choices=RequestStatus.choices, default=RequestStatus.PENDING)
    note = models.CharField(max_length=255, blank=True, default="")
    created_at = models.DateTimeField()
    approved_at = models.DateTimeField(null=True, blank=True)

    kind = None

    class Meta:
        abstract = True
        ordering = ["-id"]

    def __str__(self):
        return f"{self.kind} #{self.pk} {self.requested_amount} {self.coin_symbol} [{self.status}]"

    @property
    def is_pending(self):
        return self.status == RequestStatus.PENDING


class DepositRequest(BaseTransferRequest):
    kind = RequestKind.DEPOSIT


class WithdrawRequest(BaseTransferRequest):
    kind = RequestKind.WITHDRAW


REQUEST_MODELS = {
    RequestKind.DEPOSIT: DepositRequest,
    RequestKind.WITHDRAW: WithdrawRequest,
}
