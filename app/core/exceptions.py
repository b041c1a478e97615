"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""


class StorageError(DomainError):
    """Raised when the database rejects a statement or is unreachable.

    The message is safe to return to clients; the driver exception is kept
    as ``__cause__``.
    """


class AuthenticationError(DomainError):
    """Raised when the caller has no valid bearer token."""


class AuthorizationError(DomainError):
    """Raised when the caller lacks a permission required by the route."""
