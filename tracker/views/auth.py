"""
Session login and logout views.

Used by the session authentication strategy; API clients using the JWT
strategy obtain tokens from /api/token/ instead.
"""

import logging

from django.contrib.auth import views as auth_views
from django.utils.decorators import method_decorator
from django_ratelimit.decorators import ratelimit

from tracker.utils import client_ip

security_logger = logging.getLogger("security")


@method_decorator(ratelimit(key="ip", rate="5/m", method="POST", block=True), name="post")
class LoginView(auth_views.LoginView):
    """
    GET /login/
    Show the login form.

    POST /login/
    Sign in and go back to the page that asked for it.
    """

    template_name = "registration/login.html"
    redirect_authenticated_user = True

    def form_valid(self, form):
        user = form.get_user()
        security_logger.info(f"User {user.username} logged in from IP {client_ip(self.request)}")
        return super().form_valid(form)

    def form_invalid(self, form):
        username = form.data.get("username", "")
        security_logger.warning(f"Failed login for {username!r} from IP {client_ip(self.request)}")
        return super().form_invalid(form)


class LogoutView(auth_views.LogoutView):
    """
    POST /logout/
    Sign out.
    """

    next_page = "login"

    def post(self, request, *args, **kwargs):
        if request.user.is_authenticated:
            security_logger.info(f"User {request.user.username} logged out from IP {client_ip(request)}")
        return super().post(request, *args, **kwargs)
