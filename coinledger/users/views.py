import logging

from django.conf import settings
from django.db import transaction
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.response import Response
from rest_framework.views import APIView

from ledger.engine import SettlementEngine
from .models import User
from .serializers import LoginSerializer, RegisterSerializer

logger = logging.getLogger(__name__)


class RegisterView(APIView):
    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data["username"]

        engine = SettlementEngine()
        with transaction.atomic():
            user = User(name=username)
            user.set_pin(serializer.validated_data["pin"])
            user.save()
            if settings.SIGNUP_GRANT > 0:
                engine.grant(user, engine.quote_symbol, settings.SIGNUP_GRANT, note="signup grant")

        logger.info(f"Registered user {user.name} ({user.id})")
        return Response(
            {"message": "Register success", "username": user.name},
            status=status.HTTP_201_CREATED,
        )


class LoginView(APIView):
    def post(self, request):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        user = User.objects.filter(name=serializer.validated_data["username"]).first()
        if user is None or not user.check_pin(serializer.validated_data["pin"]):
            raise AuthenticationFailed("Invalid username or pin")

        return Response({"message": "Login success", "username": user.name, "role": user.role})
