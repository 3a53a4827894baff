import uuid

from django.contrib.auth.hashers import check_password, make_password
from django.db import models


class User(models.Model):
    ROLE_CHOICES = [
        ("USER", "User"),
        ("ADMIN", "Admin"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    pin = models.CharField(max_length=128)
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default="USER")
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.name} ({self.role})"

    @property
    def is_admin(self):
        return self.role == "ADMIN"

    # DRF's IsAuthenticated and throttling look for this attribute
    @property
    def is_authenticated(self):
        return True

    def set_pin(self, raw_pin):
        self.pin = make_password(str(raw_pin))

    def check_pin(self, raw_pin):
        return check_password(str(raw_pin), self.pin)
