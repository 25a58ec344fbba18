"""
Session (username and password) authentication.
"""

from rest_framework.authentication import SessionAuthentication

from .base import AuthenticationStrategy


class SessionStrategy(AuthenticationStrategy):
    """
    Users sign in through the login form and are tracked by the session
    cookie. Unsafe requests must carry the CSRF token.
    """

    name = "session"
    authentication_classes = (SessionAuthentication,)
