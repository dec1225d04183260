"""
Exception types shared by the repositories, services and functions.

The function layer maps them to HTTP status codes: ``ValidationError``
(and its subclasses) become 400, everything else becomes 500.  A
missing record is deliberately not mapped to 404; callers only see a
generic "could not ..." message while the log keeps the detail.
"""


class ServiceError(Exception):
    """Base class for errors raised below the function layer."""


class ValidationError(ServiceError):
    """Malformed or missing input."""


class InvalidParametersError(ValidationError):
    """No recognised lookup parameter was supplied."""


class NotFoundError(ServiceError):
    """The requested record does not exist."""


class RepositoryError(ServiceError):
    """A call to the backing store failed."""
