"""
Shared serializer behaviour for write requests.
"""

from collections.abc import Mapping

from tracker.exceptions import DisallowedParameters

# Keys browsers and form helpers add to every submission.
IGNORED_PARAMETERS = frozenset({"csrfmiddlewaretoken", "format", "_method"})


class StrictFieldsMixin:
    """
    Rejects write data that mentions fields the serializer does not accept.

    Unknown keys and read-only keys both raise DisallowedParameters instead
    of being dropped silently.
    """

    def to_internal_value(self, data):
        if isinstance(data, Mapping):
            writable = {name for name, field in self.fields.items() if not field.read_only}
            disallowed = sorted(
                name for name in data if name not in writable and name not in IGNORED_PARAMETERS
            )
            if disallowed:
                raise DisallowedParameters(disallowed)
        return super().to_internal_value(data)


def resource_name(serializer):
    """Model name the serializer's errors are reported under ("comment")."""
    meta = getattr(serializer, "Meta", None)
    model = getattr(meta, "model", None)
    if model is not None:
        return model._meta.model_name
    return getattr(meta, "resource_name", type(serializer).__name__.lower())
