from django.core.validators import MinValueValidator, RegexValidator
from django.db import models

SYMBOL_PATTERN = r"^[A-Z]{2,10}$"

symbol_validator = RegexValidator(SYMBOL_PATTERN, "Symbol must be 2-10 uppercase letters")


class Coin(models.Model):
    symbol = models.CharField(max_length=10, primary_key=True, validators=[symbol_validator])
    price = models.DecimalField(max_digits=28, decimal_places=8, validators=[MinValueValidator(0)])

    class Meta:
        ordering = ["symbol"]

    def __str__(self):
        return f"{self.symbol} @ {self.price}"
