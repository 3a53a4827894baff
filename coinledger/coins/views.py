from rest_framework.response import Response
from rest_framework.views import APIView

from ledger.engine import SettlementEngine
from .serializers import CoinSerializer


class CoinListView(APIView):
    def get(self, request):
        coins = SettlementEngine().list_coins()
        return Response(CoinSerializer(coins, many=True).data)
