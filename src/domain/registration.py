"""
Registration domain service - account creation pipeline.

This module contains the core business logic for user registration.
Input reaching the service has already passed RegistrationValidator.

Pipeline
========

1. Uniqueness fast path   repository.exists_by_email -> DuplicateEmail
2. Token issuance         token_issuer.issue(email)  -> ConfigurationFault
3. Credential hashing     password_hasher.hash(password)
4. Entity construction    NewAccount with phones copied from the input
5. Persistence            repository.save -> DuplicateEmail on a lost race
6. View mapping           AccountView (no credential hash)

Note: the check in step 1 is advisory. Two concurrent registrations for
the same email can both pass it; the store's uniqueness constraint in
step 5 is the authoritative source of DuplicateEmail.

No partial-failure recovery: if any step fails nothing is committed and
the caller retries the whole registration.
"""

import logging
from dataclasses import dataclass

from .account import AccountView, NewAccount, Phone
from .contracts import RegistrationInput
from .exceptions import DuplicateEmail
from .ports import AccountRepository, PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: uniqueness check, token issuance,
    password hashing, account persistence and view mapping.
    """

    repository: AccountRepository
    password_hasher: PasswordHasher
    token_issuer: TokenIssuer

    def register_account(self, payload: RegistrationInput) -> AccountView:
        """
        Register a new account.

        Args:
            payload: Validated registration input

        Returns:
            Outward view of the stored account

        Raises:
            DuplicateEmail: If the email is already registered
            ConfigurationFault: If the token signing key is unusable
        """
        email = payload.email
        if self.repository.exists_by_email(email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail(email)

        token = self.token_issuer.issue(email)
        credential_hash = self.password_hasher.hash(payload.password)

        new_account = NewAccount(
            name=payload.name,
            email=email,
            credential_hash=credential_hash,
            token=token,
            phones=self._copy_phones(payload),
        )

        try:
            account = self.repository.save(new_account)
        except DuplicateEmail:
            logger.info("Registration rejected by store uniqueness constraint")
            raise

        logger.info("Registered account %s", account.id)
        return AccountView.from_account(account)

    def _copy_phones(self, payload: RegistrationInput) -> tuple[Phone, ...]:
        """Copy submitted phones into owned Phone records, preserving order."""
        return tuple(
            Phone(
                number=phone.number,
                city_code=phone.city_code,
                country_code=phone.country_code,
            )
            for phone in payload.phones or ()
        )
