"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from typing import Protocol
from uuid import UUID

from .account import Account, NewAccount


class AccountRepository(Protocol):
    """Port interface for account persistence."""

    def exists_by_email(self, email: str) -> bool:
        """
        Check whether an account already uses this email.

        Comparison is case-insensitive.
        """
        ...

    def save(self, account: NewAccount) -> Account:
        """
        Persist a new account with its phones.

        The store assigns the id and sets created/modified/last-login
        to the same instant. The store must itself reject a second
        account for the same email (case-insensitive).

        Args:
            account: Unsaved account aggregate

        Returns:
            The stored account

        Raises:
            DuplicateEmail: If the store's uniqueness constraint rejects the insert
        """
        ...

    def find_by_id(self, account_id: UUID) -> Account | None:
        """Return the stored account, or None if no account has this id."""
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way credential hashing."""

    def hash(self, raw: str) -> str:
        """Return a salted digest; two calls with the same input differ."""
        ...

    def verify(self, raw: str, digest: str) -> bool:
        """Return True iff raw produced digest."""
        ...


class TokenIssuer(Protocol):
    """Port interface for authentication token issuance."""

    def issue(self, subject: str) -> str:
        """
        Issue a signed, time-bounded token for the subject.

        Raises:
            ConfigurationFault: If the signing key is missing or unusable
        """
        ...
