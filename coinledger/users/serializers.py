from rest_framework import serializers
from .models import User

class RegisterSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=100, trim_whitespace=True)
    pin = serializers.CharField(max_length=64, trim_whitespace=False)

    def validate_username(self, value):
        if len(value) < 2:
            raise serializers.ValidationError("username too short")
        if User.objects.filter(name=value).exists():
            raise serializers.ValidationError("Username already exists")
        return value

    def validate_pin(self, value):
        if len(value) < 4:
            raise serializers.ValidationError("pin must be >= 4 chars")
        return value


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(max_length=100, trim_whitespace=True)
    pin = serializers.CharField(max_length=64, trim_whitespace=False)


class ResetPinSerializer(serializers.Serializer):
    new_pin = serializers.CharField(min_length=4, max_length=64, trim_whitespace=False)


class UserSerializer(serializers.ModelSerializer):
    username = serializers.CharField(source="name")

    class Meta:
        model = User
        fields = ("username", "role", "created_at")
