import logging

from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from coins.models import Coin
from coins.serializers import CoinCreateSerializer, CoinPriceSerializer, CoinSerializer
from ledger.engine import SettlementEngine
from transfers.models import RequestKind
from transfers.serializers import (
    ApproveRequestSerializer,
    DepositRequestSerializer,
    RejectRequestSerializer,
    WithdrawRequestSerializer,
)
from users.models import User
from users.permissions import IsAdminPin
from users.serializers import ResetPinSerializer, UserSerializer

logger = logging.getLogger(__name__)

REQUEST_SERIALIZERS = {
    RequestKind.DEPOSIT: DepositRequestSerializer,
    RequestKind.WITHDRAW: WithdrawRequestSerializer,
}


class AdminUserListView(APIView):
    permission_classes = [IsAdminPin]

    def get(self, request):
        users = User.objects.all().order_by("-created_at")
        return Response(UserSerializer(users, many=True).data)


class AdminResetPinView(APIView):
    permission_classes = [IsAdminPin]

    def post(self, request, username):
        serializer = ResetPinSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = get_object_or_404(User, name=username)
        user.set_pin(serializer.validated_data["new_pin"])
        user.save(update_fields=["pin"])
        logger.info(f"Admin {request.user.name} reset pin for {user.name}")
        return Response({"message": "PIN reset success", "username": user.name})


class AdminRequestListView(APIView):
    """All users' requests of one kind, newest first."""

    permission_classes = [IsAdminPin]
    kind = None

    def get(self, request):
        requests = SettlementEngine().list_requests(self.kind, limit=request.query_params.get("limit"))
        return Response(REQUEST_SERIALIZERS[self.kind](requests, many=True).data)


class AdminDepositApproveView(APIView):
    permission_classes = [IsAdminPin]

    def post(self, request, request_id):
        logger.info(f"Admin deposit approval for #{request_id}. Data: {request.data}")
        serializer = ApproveRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        deposit = SettlementEngine().approve_deposit(
            request_id,
            serializer.validated_data["approved_amount"],
            serializer.validated_data["note"],
        )
        return Response({"message": "Deposit approved and balance updated", **DepositRequestSerializer(deposit).data})


class AdminWithdrawApproveView(APIView):
    permission_classes = [IsAdminPin]

    def post(self, request, request_id):
        logger.info(f"Admin withdraw approval for #{request_id}. Data: {request.data}")
        serializer = ApproveRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        withdraw = SettlementEngine().approve_withdraw(
            request_id,
            serializer.validated_data["approved_amount"],
            serializer.validated_data["note"],
        )
        return Response({"message": "Withdraw approved and balance deducted", **WithdrawRequestSerializer(withdraw).data})


class AdminRequestRejectView(APIView):
    permission_classes = [IsAdminPin]
    kind = None

    def post(self, request, request_id):
        logger.info(f"Admin {self.kind} rejection for #{request_id}. Data: {request.data}")
        serializer = RejectRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        rejected = SettlementEngine().reject_request(self.kind, request_id, serializer.validated_data["note"])
        return Response({"message": f"{self.kind.label} request rejected", **REQUEST_SERIALIZERS[self.kind](rejected).data})


class AdminCoinView(APIView):
    permission_classes = [IsAdminPin]

    def get(self, request):
        coins = SettlementEngine().list_coins()
        logger.info(f"Returned {len(coins)} coins")
        return Response({"coins": CoinSerializer(coins, many=True).data})

    def post(self, request):
        logger.info(f"Incoming data: {request.data}")
        serializer = CoinCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        symbol = serializer.validated_data["symbol"]
        if Coin.objects.filter(symbol=symbol).exists():
            logger.warning(f"Coin already exists: {symbol}")
            return Response(
                {"error": "Coin already exists", "code": "coin_exists", "symbol": symbol},
                status=status.HTTP_409_CONFLICT,
            )

        coin = Coin.objects.create(symbol=symbol, price=serializer.validated_data["price"])
        logger.info(f"Created coin: {symbol} @ {coin.price}")
        return Response(
            {"success": True, "coin": CoinSerializer(coin).data},
            status=status.HTTP_201_CREATED,
        )


class AdminCoinPriceView(APIView):
    permission_classes = [IsAdminPin]

    def patch(self, request, symbol):
        serializer = CoinPriceSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        coin = get_object_or_404(Coin, symbol=symbol)
        previous = coin.price
        coin.price = serializer.validated_data["price"]
        coin.save(update_fields=["price"])
        logger.info(f"Repriced {symbol}: {previous} -> {coin.price}")
        return Response({"success": True, "coin": CoinSerializer(coin).data})
