"""
Domain layer - Pure business logic with zero framework imports.

This package contains the core business logic for account registration.
It defines its own port interfaces for infrastructure abstraction, so
persistence, hashing and token signing stay behind adapters.
"""

from .account import Account, AccountView, NewAccount, Phone
from .contracts import PhoneInput, RegistrationInput
from .exceptions import ConfigurationFault, DuplicateEmail, RegistrationError, ValidationFailure
from .ports import AccountRepository, PasswordHasher, TokenIssuer
from .registration import RegistrationService
from .validation import RegistrationValidator, is_valid_email, is_valid_password

__all__ = [
    "Account",
    "AccountRepository",
    "AccountView",
    "ConfigurationFault",
    "DuplicateEmail",
    "NewAccount",
    "PasswordHasher",
    "Phone",
    "PhoneInput",
    "RegistrationError",
    "RegistrationInput",
    "RegistrationService",
    "RegistrationValidator",
    "TokenIssuer",
    "ValidationFailure",
    "is_valid_email",
    "is_valid_password",
]
