from rest_framework import serializers
from .models import Transaction


class TradeSerializer(serializers.Serializer):
    symbol = serializers.CharField(max_length=10)
    amount = serializers.DecimalField(max_digits=28, decimal_places=8)

    def validate_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("amount must be positive")
        return value


class SettlementResultSerializer(serializers.Serializer):
    user = serializers.CharField()
    symbol = serializers.CharField()
    amount = serializers.DecimalField(max_digits=28, decimal_places=8)
    price = serializers.DecimalField(max_digits=28, decimal_places=8)
    total = serializers.DecimalField(max_digits=28, decimal_places=8)
    transaction_id = serializers.IntegerField()


class TransactionSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source="user.name")
    type = serializers.CharField(source="kind")

    class Meta:
        model = Transaction
        fields = ("id", "user", "type", "coin_symbol", "amount", "price", "total", "note", "created_at")
