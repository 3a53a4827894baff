from django.urls import path
from transfers.models import RequestKind
from .views import (
    AdminUserListView,
    AdminResetPinView,
    AdminRequestListView,
    AdminDepositApproveView,
    AdminWithdrawApproveView,
    AdminRequestRejectView,
    AdminCoinView,
    AdminCoinPriceView,
)

urlpatterns = [
    path("api/admin/users", AdminUserListView.as_view()),
    path("api/admin/users/<str:username>/reset-pin", AdminResetPinView.as_view()),
    path("api/admin/deposits", AdminRequestListView.as_view(kind=RequestKind.DEPOSIT)),
    path("api/admin/deposits/<int:request_id>/approve", AdminDepositApproveView.as_view()),
    path("api/admin/deposits/<int:request_id>/reject", AdminRequestRejectView.as_view(kind=RequestKind.DEPOSIT)),
    path("api/admin/withdraws", AdminRequestListView.as_view(kind=RequestKind.WITHDRAW)),
    path("api/admin/withdraws/<int:request_id>/approve", AdminWithdrawApproveView.as_view()),
    path("api/admin/withdraws/<int:request_id>/reject", AdminRequestRejectView.as_view(kind=RequestKind.WITHDRAW)),
    path("api/admin/coins", AdminCoinView.as_view()),
    path("api/admin/coins/<str:symbol>", AdminCoinPriceView.as_view()),
]
