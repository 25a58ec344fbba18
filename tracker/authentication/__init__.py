"""
Pluggable authentication strategies.

The strategy is chosen by the ``AUTHENTICATION_STRATEGY`` setting, either by
short name or by dotted path, and built once in ``TrackerConfig.ready``.
"""

from django.core.exceptions import ImproperlyConfigured
from django.utils.module_loading import import_string

from .base import AuthenticationStrategy

STRATEGIES = {
    "session": "tracker.authentication.session.SessionStrategy",
    "jwt": "tracker.authentication.bearer.JWTStrategy",
}


def load_strategy(name):
    """Instantiate the strategy registered as ``name`` (or found at that dotted path)."""
    path = STRATEGIES.get(name, name)
    try:
        strategy_class = import_string(path)
    except ImportError as exc:
        raise ImproperlyConfigured(f"Unknown authentication strategy: {name!r}") from exc
    if not (isinstance(strategy_class, type) and issubclass(strategy_class, AuthenticationStrategy)):
        raise ImproperlyConfigured(f"{path} is not an AuthenticationStrategy")
    return strategy_class()


__all__ = ["AuthenticationStrategy", "STRATEGIES", "load_strategy"]
