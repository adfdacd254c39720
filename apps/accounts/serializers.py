from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User, AVAILABLE_COLORS


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for profile display."""

    class Meta:
        model = User
        fields = [
            'id',
            'email',
            'nickname',
            'color_code',
            'personal_asset_color',
            'profile_image_url',
            'created_at',
        ]
        read_only_fields = fields


class UserMinimalSerializer(serializers.ModelSerializer):
    """Minimal user info for nested serialization."""

    class Meta:
        model = User
        fields = ['id', 'nickname', 'color_code']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Input serializer for user registration."""

    email = serializers.EmailField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    password_confirm = serializers.CharField(
        write_only=True,
        style={'input_type': 'password'}
    )
    nickname = serializers.CharField(min_length=2, max_length=10)
    color_code = serializers.ChoiceField(choices=AVAILABLE_COLORS)
    profile_image_url = serializers.URLField(required=False, allow_null=True, max_length=500)

    def validate(self, attrs):
        """Validate password confirmation."""
        if attrs['password'] != attrs['password_confirm']:
            raise serializers.ValidationError({
                'password_confirm': 'Passwords do not match'
            })
        return attrs


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    email = serializers.EmailField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class UpdateProfileSerializer(serializers.Serializer):
    """Input serializer for profile updates (all fields optional)."""

    nickname = serializers.CharField(min_length=2, max_length=10, required=False)
    color_code = serializers.ChoiceField(choices=AVAILABLE_COLORS, required=False)
    personal_asset_color = serializers.RegexField(
        regex=r'^#[0-9A-Fa-f]{6}$',
        required=False,
        help_text='Hex color, e.g. #E91E63'
    )
    profile_image_url = serializers.URLField(required=False, max_length=500)
