from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from ledger.engine import SettlementEngine
from users.permissions import HasPin
from .models import RequestKind
from .serializers import (
    DepositRequestCreateSerializer,
    DepositRequestSerializer,
    WithdrawRequestCreateSerializer,
    WithdrawRequestSerializer,
)


class DepositRequestCreateView(APIView):
    permission_classes = [HasPin]

    def post(self, request):
        serializer = DepositRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        deposit = SettlementEngine().submit_deposit_request(
            request.user,
            serializer.validated_data["coin_symbol"],
            serializer.validated_data["requested_amount"],
        )
        return Response(
            {"message": "Deposit request submitted", **DepositRequestSerializer(deposit).data},
            status=status.HTTP_201_CREATED,
        )


class WithdrawRequestCreateView(APIView):
    permission_classes = [HasPin]

    def post(self, request):
        serializer = WithdrawRequestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        withdraw = SettlementEngine().submit_withdraw_request(
            request.user,
            serializer.validated_data["coin_symbol"],
            serializer.validated_data["requested_amount"],
            serializer.validated_data["address"],
        )
        return Response(
            {"message": "Withdraw request submitted", **WithdrawRequestSerializer(withdraw).data},
            status=status.HTTP_201_CREATED,
        )


class DepositRequestListView(APIView):
    permission_classes = [HasPin]

    def get(self, request):
        deposits = SettlementEngine().list_requests(
            RequestKind.DEPOSIT, user=request.user, limit=request.query_params.get("limit")
        )
        return Response(DepositRequestSerializer(deposits, many=True).data)


class WithdrawRequestListView(APIView):
    permission_classes = [HasPin]

    def get(self, request):
        withdraws = SettlementEngine().list_requests(
            RequestKind.WITHDRAW, user=request.user, limit=request.query_params.get("limit")
        )
        return Response(WithdrawRequestSerializer(withdraws, many=True).data)
