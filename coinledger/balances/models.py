from django.db import models
from users.models import User

class Balance(models.Model):
    user = models.ForeignKey(User, on_delete=models.PROTECT, related_name="balances")
    coin_symbol = models.CharField(max_length=10)
    amount = models.DecimalField(max_digits=28, decimal_places=8, default=0)

    class Meta:
        unique_together = ("user", "coin_symbol")
        ordering = ["coin_symbol"]
        constraints = [
            models.CheckConstraint(condition=models.Q(amount__gte=0), name="balance_amount_non_negative"),
        ]

    def __str__(self):
        return f"{self.user.name}: {self.coin_symbol} {self.amount}"
