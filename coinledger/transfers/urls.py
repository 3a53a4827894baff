from django.urls import path
from .views import (
    DepositRequestCreateView,
    DepositRequestListView,
    WithdrawRequestCreateView,
    WithdrawRequestListView,
)

urlpatterns = [
    path("api/deposit-request", DepositRequestCreateView.as_view(), name="deposit-request"),
    path("api/deposit-requests", DepositRequestListView.as_view(), name="deposit-requests"),
    path("api/withdraw-request", WithdrawRequestCreateView.as_view(), name="withdraw-request"),
    path("api/withdraw-requests", WithdrawRequestListView.as_view(), name="withdraw-requests"),
]
