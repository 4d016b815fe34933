"""Raw registration input as parsed from the transport layer.

Fields are optional because presence is itself a validation rule; the
registration service only ever receives input that passed validation.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PhoneInput:
    """Submitted phone entry."""

    number: str | None = None
    city_code: str | None = None
    country_code: str | None = None


@dataclass(frozen=True)
class RegistrationInput:
    """Submitted registration payload."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    phones: tuple[PhoneInput, ...] | None = None
