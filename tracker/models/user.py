"""
User model for the tracker.
"""

from django.contrib.auth.models import AbstractBaseUser, BaseUserManager
from django.db import models
from django.utils import timezone

from .membership import Role


class UserManager(BaseUserManager):
    """Custom manager for User model."""

    def create_user(self, username, email="", password=None, **extra_fields):
        """Create and return a regular user."""
        if not username:
            raise ValueError("Username is required")
        user = self.model(username=username, email=self.normalize_email(email), **extra_fields)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, email="", password=None, **extra_fields):
        """Create and return a superuser."""
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        return self.create_user(username, email, password, **extra_fields)


class User(AbstractBaseUser):
    """
    A person who can sign in to the tracker.

    Permissions inside a project come from ``role(project)``, not from Django
    model permissions.
    """

    username = models.CharField(max_length=50, unique=True)
    email = models.EmailField(max_length=254, blank=True, default="")
    first_name = models.CharField(max_length=100, blank=True, default="")
    last_name = models.CharField(max_length=100, blank=True, default="")
    date_joined = models.DateTimeField(default=timezone.now)

    # Required for Django auth
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)
    is_superuser = models.BooleanField(default=False)

    objects = UserManager()

    USERNAME_FIELD = "username"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = []

    class Meta:
        app_label = "tracker"
        db_table = "users"

    def __str__(self):
        return self.username

    @property
    def name(self):
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.username

    def has_perm(self, perm, obj=None):
        return self.is_superuser

    def has_module_perms(self, app_label):
        return self.is_superuser

    def role(self, project):
        """
        Return this user's Role on ``project``, or None if they have none.

        The project owner is always OWNER; otherwise the membership decides
        between ADMIN and MEMBER.
        """
        if project is None or self.pk is None:
            return None
        if project.owner_id == self.pk:
            return Role.OWNER
        membership = project.memberships.filter(user_id=self.pk).first()
        if membership is None:
            return None
        return membership.role
