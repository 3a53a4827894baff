from django.urls import path
from .views import BuyView, SellView, TransactionHistoryView

urlpatterns = [
    path("api/buy", BuyView.as_view(), name="buy"),
    path("api/sell", SellView.as_view(), name="sell"),
    path("api/transactions", TransactionHistoryView.as_view(), name="transactions"),
]
