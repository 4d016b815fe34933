"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class RegistrationError(Exception):
    """Base class for registration domain errors."""

    pass


class ValidationFailure(RegistrationError):
    """Inbound payload violates a required-field or pattern rule."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class DuplicateEmail(RegistrationError):
    """Email already belongs to a registered account."""

    def __init__(self, email: str) -> None:
        super().__init__(email)
        self.email = email


class ConfigurationFault(Exception):
    """Signing key, pattern or work factor configuration is missing or invalid.

    Not caller-correctable: surfaced as an internal error.
    """

    pass
