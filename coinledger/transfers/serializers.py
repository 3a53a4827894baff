from rest_framework import serializers
from .models import DepositRequest, WithdrawRequest


class DepositRequestCreateSerializer(serializers.Serializer):
    coin_symbol = serializers.CharField(max_length=10)
    requested_amount = serializers.DecimalField(max_digits=28, decimal_places=8)

    def validate_requested_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("requested_amount must be positive")
        return value


class WithdrawRequestCreateSerializer(DepositRequestCreateSerializer):
    address = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


class ApproveRequestSerializer(serializers.Serializer):
    approved_amount = serializers.DecimalField(max_digits=28, decimal_places=8)
    note = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")

    def validate_approved_amount(self, value):
        if value <= 0:
            raise serializers.ValidationError("approved_amount must be positive")
        return value


class RejectRequestSerializer(serializers.Serializer):
    note = serializers.CharField(max_length=255, required=False, allow_blank=True, default="")


REQUEST_FIELDS = (
    "id",
    "user",
    "coin_symbol",
    "requested_amount",
    "approved_amount",
    "address",
    "status",
    "note",
    "created_at",
    "approved_at",
)


class DepositRequestSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source="user.name")

    class Meta:
        model = DepositRequest
        fields = REQUEST_FIELDS


class WithdrawRequestSerializer(serializers.ModelSerializer):
    user = serializers.CharField(source="user.name")

    class Meta:
        model = WithdrawRequest
        fields = REQUEST_FIELDS
