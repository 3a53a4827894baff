import logging

from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed

from .models import User

logger = logging.getLogger(__name__)


class PinHeaderAuthentication(BaseAuthentication):
    """Authenticates requests carrying ``X-User`` and ``X-Pin`` headers.

    Requests without the headers stay anonymous, so public endpoints keep
    working and protected ones answer 401 through their permission classes.
    """

    def authenticate(self, request):
        username = request.headers.get("X-User")
        pin = request.headers.get("X-Pin")
        if not username and not pin:
            return None
        if not username or not pin:
            raise AuthenticationFailed("Missing login headers")

        try:
            user = User.objects.get(name=username.strip())
        except User.DoesNotExist:
            logger.warning(f"Login headers for unknown user: {username}")
            raise AuthenticationFailed("Invalid user or pin")

        if not user.check_pin(pin):
            logger.warning(f"Wrong pin for user: {user.name}")
            raise AuthenticationFailed("Invalid user or pin")
        return (user, None)

    def authenticate_header(self, request):
        return "Pin"
