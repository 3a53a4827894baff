from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("users.urls")),
    path("", include("coins.urls")),
    path("", include("balances.urls")),
    path("", include("ledger.urls")),
    path("", include("transfers.urls")),
    path("", include("admin_api.urls")),
]
