from django.contrib import admin
from .models import Balance


@admin.register(Balance)
class BalanceAdmin(admin.ModelAdmin):
    list_display = ("user", "coin_symbol", "amount")
    list_filter = ("coin_symbol",)
    readonly_fields = ("user", "coin_symbol", "amount")

    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
