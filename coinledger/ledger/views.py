from rest_framework.response import Response
from rest_framework.views import APIView

from users.permissions import HasPin
from .engine import SettlementEngine
from .serializers import SettlementResultSerializer, TradeSerializer, TransactionSerializer


class BuyView(APIView):
    permission_classes = [HasPin]

    def post(self, request):
        serializer = TradeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = SettlementEngine().buy(request.user, **serializer.validated_data)
        return Response({"message": "Buy success", **SettlementResultSerializer(result).data})


class SellView(APIView):
    permission_classes = [HasPin]

    def post(self, request):
        serializer = TradeSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        result = SettlementEngine().sell(request.user, **serializer.validated_data)
        return Response({"message": "Sell success", **SettlementResultSerializer(result).data})


class TransactionHistoryView(APIView):
    permission_classes = [HasPin]

    def get(self, request):
        transactions = SettlementEngine().get_transactions(request.user, request.query_params.get("limit"))
        return Response(TransactionSerializer(transactions, many=True).data)
