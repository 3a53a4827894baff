import re

from rest_framework import serializers

from .models import Coin, SYMBOL_PATTERN


class CoinSerializer(serializers.ModelSerializer):
    class Meta:
        model = Coin
        fields = ("symbol", "price")


class CoinCreateSerializer(serializers.Serializer):
    symbol = serializers.CharField(max_length=10)
    price = serializers.DecimalField(max_digits=28, decimal_places=8, min_value=0)

    def validate_symbol(self, value):
        if not re.fullmatch(SYMBOL_PATTERN, value):
            raise serializers.ValidationError("Symbol must be 2-10 uppercase letters")
        return value


class CoinPriceSerializer(serializers.Serializer):
    price = serializers.DecimalField(max_digits=28, decimal_places=8, min_value=0)
