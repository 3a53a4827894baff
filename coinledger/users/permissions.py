from rest_framework.permissions import BasePermission
from users.models import User

class HasPin(BasePermission):
    def has_permission(self, request, view):
        return isinstance(request.user, User)

class IsAdminPin(BasePermission):
    message = "Admin only"

    def has_permission(self, request, view):
        return isinstance(request.user, User) and request.user.is_admin
