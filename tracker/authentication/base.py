"""
Base class for authentication strategies.
"""

import logging

from django.conf import settings
from django.contrib.auth.views import redirect_to_login
from rest_framework import status
from rest_framework.exceptions import NotAuthenticated
from rest_framework.response import Response

from tracker.utils import client_ip

security_logger = logging.getLogger("security")


class AuthenticationStrategy:
    """
    Decides who is making a request and what to do when nobody is.

    Subclasses list the DRF authenticators they rely on; the login gate and
    the unauthenticated responses are shared.
    """

    name = None
    authentication_classes = ()

    def get_authenticators(self):
        return [authenticator() for authenticator in self.authentication_classes]

    def login_required(self, request):
        """Return the current user, or raise NotAuthenticated."""
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            security_logger.info(
                f"Unauthenticated {request.method} {request.path} from IP {client_ip(request)}"
            )
            raise NotAuthenticated()
        return user

    def authenticate_header(self, request):
        for authenticator in self.get_authenticators():
            header = authenticator.authenticate_header(request)
            if header:
                return header
        return None

    def unauthenticated_response(self, request, fmt):
        """
        Response for a request that failed the login gate.

        Browsers are sent to the login page and come back afterwards; API
        clients get an empty 401.
        """
        if fmt == "html":
            return redirect_to_login(request.get_full_path(), login_url=settings.LOGIN_URL)

        response = Response(status=status.HTTP_401_UNAUTHORIZED)
        header = self.authenticate_header(request)
        if header:
            response["WWW-Authenticate"] = header
        return response
