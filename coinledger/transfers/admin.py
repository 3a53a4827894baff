from django.contrib import admin
from .models import DepositRequest, WithdrawRequest


class TransferRequestAdmin(admin.ModelAdmin):
    list_display = ("id", "user", "coin_symbol", "requested_amount", "approved_amount", "status", "created_at", "approved_at")
    list_filter = ("status", "coin_symbol")
    readonly_fields = ("user", "coin_symbol", "requested_amount", "approved_amount", "address", "status", "note", "created_at", "approved_at")

    # Adjudication goes through the admin API so balances and the log stay in step
    def has_add_permission(self, request):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


admin.site.register(DepositRequest, TransferRequestAdmin)
admin.site.register(WithdrawRequest, TransferRequestAdmin)
