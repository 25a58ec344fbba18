"""
Tracker app configuration for Django.
"""

from django.apps import AppConfig, apps
from django.conf import settings


class TrackerConfig(AppConfig):
    """
    Configuration for the tracker application.

    Builds the process-wide services once the app registry is ready:
    - ``authentication``: the strategy named by AUTHENTICATION_STRATEGY
    - ``markdown``: the renderer used for comment bodies
    """

    default_auto_field = "django.db.models.BigAutoField"
    name = "tracker"
    verbose_name = "Tracker"

    authentication = None
    markdown = None

    def ready(self):
        from tracker.authentication import load_strategy
        from tracker.markup import MarkdownRenderer

        self.authentication = load_strategy(getattr(settings, "AUTHENTICATION_STRATEGY", "session"))
        self.markdown = MarkdownRenderer.from_settings()


def get_services():
    """Return the tracker app config, which carries the shared services."""
    return apps.get_app_config("tracker")
