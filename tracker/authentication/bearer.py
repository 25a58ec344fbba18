"""
JSON Web Token authentication for API clients.
"""

from rest_framework.authentication import SessionAuthentication
from rest_framework_simplejwt.authentication import JWTAuthentication

from .base import AuthenticationStrategy


class JWTStrategy(AuthenticationStrategy):
    """
    API clients send ``Authorization: Bearer <token>`` obtained from
    ``/api/token/``. Browser sessions keep working alongside tokens.
    """

    name = "jwt"
    authentication_classes = (JWTAuthentication, SessionAuthentication)
