from django.urls import path
from .views import CoinListView

urlpatterns = [
    path("api/coins", CoinListView.as_view(), name="coin-list"),
]
