"""
Test settings for the bug tracker.
Uses an in-memory SQLite database and fast password hashing.
"""

import os

os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret-key-not-for-production")

from .base import *  # noqa: F401, F403, E402

DEBUG = False

RATELIMIT_ENABLE = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = ["django.contrib.auth.hashers.MD5PasswordHasher"]

AUTHENTICATION_STRATEGY = "session"
INFINITE_SCROLL_PAGE_SIZE = 50
