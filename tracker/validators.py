"""
Custom validators and fields for the tracker.

Rejects HTML in user-supplied plain-text names such as project names.
"""

import bleach
from rest_framework import serializers


def validate_plain_text(value):
    """
    Validate that a value does not contain HTML tags.

    Rejects any input that contains HTML to prevent XSS attacks.
    """
    if value:
        sanitized = bleach.clean(value, tags=[], strip=True)
        if sanitized != value:
            raise serializers.ValidationError("HTML tags are not allowed.")
    return value


class PlainTextField(serializers.CharField):
    """
    A CharField that rejects HTML content to prevent XSS.

    Uses bleach to detect and reject any HTML tags in the input.
    """

    def to_internal_value(self, data):
        value = super().to_internal_value(data)
        return validate_plain_text(value)
