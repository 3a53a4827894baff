from rest_framework import serializers
from .models import Balance

class BalanceSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source="user.name")

    class Meta:
        model = Balance
        fields = ("user", "coin_symbol", "amount")
