"""
Utility functions for the tracker.
"""

from django.db import IntegrityError, transaction
from django.db.models import Max

NUMBERING_ATTEMPTS = 3


def next_number(queryset, field="number"):
    """Return the next sequential number for ``field`` within ``queryset``."""
    current = queryset.aggregate(current=Max(field))["current"]
    return (current or 0) + 1


def save_numbered(instance, siblings, parent, save, field="number"):
    """
    Give ``instance`` the next number within ``siblings`` and save it.

    The ``parent`` row is locked while the number is allocated, so concurrent
    writers to the same parent wait for each other. On databases without row
    locks, a clash on the unique number is retried with a fresh number.
    """
    for attempt in range(NUMBERING_ATTEMPTS):
        try:
            with transaction.atomic():
                list(parent.select_for_update().values_list("pk", flat=True))
                setattr(instance, field, next_number(siblings, field))
                save()
            return
        except IntegrityError:
            setattr(instance, field, None)
            if attempt == NUMBERING_ATTEMPTS - 1:
                raise


def client_ip(request):
    """Get client IP address from request."""
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()
    return request.META.get("REMOTE_ADDR", "unknown")
