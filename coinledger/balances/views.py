from rest_framework.views import APIView
from rest_framework.response import Response
from users.permissions import HasPin
from ledger.engine import SettlementEngine
from .serializers import BalanceSerializer

class BalanceView(APIView):
    permission_classes = [HasPin]
    def get(self, request):
        balances = SettlementEngine().get_balances(request.user)
        return Response(BalanceSerializer(balances, many=True).data)
