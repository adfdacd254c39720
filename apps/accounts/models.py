from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.core.validators import MinLengthValidator
from django.db import models
import uuid


# Palette offered to users when they sign up
AVAILABLE_COLORS = [
    '#5B9FFF',  # blue
    '#E91E63',  # pink
    '#FF9800',  # orange
    '#4CAF50',  # green
    '#9C27B0',  # purple
    '#FFC107',  # yellow
    '#F44336',  # red
    '#00BCD4',  # cyan
]

DEFAULT_PERSONAL_ASSET_COLOR = '#E91E63'


class UserManager(BaseUserManager):
    """Custom user manager for email-based authentication."""

    def create_user(self, email, password=None, **extra_fields):
        if not email:
            raise ValueError('Email is required')

        email = self.normalize_email(email)
        extra_fields.setdefault('color_code', AVAILABLE_COLORS[0])
        user = self.model(email=email, **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)
        extra_fields.setdefault('nickname', 'admin')

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(email, password, **extra_fields)


class User(AbstractBaseUser, PermissionsMixin):
    """Custom user model with email authentication."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    email = models.EmailField(unique=True, max_length=255, db_index=True)
    nickname = models.CharField(max_length=10, validators=[MinLengthValidator(2)])

    # Colors used by the calendar to tell members apart
    color_code = models.CharField(max_length=7)
    personal_asset_color = models.CharField(max_length=7, default=DEFAULT_PERSONAL_ASSET_COLOR)
    profile_image_url = models.URLField(max_length=500, blank=True, null=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)

    objects = UserManager()

    USERNAME_FIELD = 'email'
    REQUIRED_FIELDS = []

    class Meta:
        db_table = 'users'
        indexes = [
            models.Index(fields=['created_at'], name='users_created_6541e9_idx'),
        ]

    def __str__(self):
        return self.email
