"""Error kinds raised by the EduPath services.

The HTTP layer maps each kind to a status code; services never deal with
transport details.
"""

from __future__ import annotations


class ServiceError(Exception):
    """Base class for domain errors surfaced to callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(ServiceError):
    """A required field is missing or malformed."""


class ConflictError(ServiceError):
    """A unique key is already taken."""


class NotFoundError(ServiceError):
    pass


class ForbiddenError(ServiceError):
    """The action needs a linked account that does not exist."""


class UnauthorizedError(ServiceError):
    """Credential mismatch, deliberately indistinguishable from an unknown account."""
