"""
Exceptions raised by the tracker request-handling layer.

All of these are recovered at the view boundary by
``tracker.errors.exception_handler`` and turned into a response that matches
the negotiated format.
"""

from rest_framework.exceptions import PermissionDenied


class FieldNotFound(LookupError):
    """A field name is malformed or missing from the reference record."""

    def __init__(self, field, record=None):
        self.field = field
        self.record = record
        super().__init__(f"Unknown field: {field!r}")


class InvalidSortDirection(ValueError):
    """A sort direction other than ASC or DESC was supplied."""

    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"Invalid sort direction: {direction!r} (expected ASC or DESC)")


class DisallowedParameters(Exception):
    """
    A write request included fields that cannot be modified.

    ``params`` lists the offending field names in the order they should be
    reported.
    """

    def __init__(self, params):
        self.params = list(params)
        super().__init__(self.message)

    @property
    def message(self):
        return f"The following parameters cannot be modified: {', '.join(self.params)}"


class ValidationFailed(Exception):
    """
    A record failed to validate during a create or update request.

    ``errors`` maps field names to lists of messages; ``resource`` is the
    model name the errors belong to (``comment``, ``project``...).
    """

    def __init__(self, resource, errors):
        self.resource = resource
        self.errors = errors
        super().__init__(f"{resource} failed to validate")

    def as_dict(self):
        return {self.resource: {field: [str(m) for m in messages] for field, messages in self.errors.items()}}


class RoleRequired(PermissionDenied):
    """The current user lacks the project role an action requires."""

    default_detail = "You don't have permission to do that."
    default_code = "role_required"
