"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for concurrent registration tests.
"""

from collections.abc import Callable

import pytest

from src.adapters.security import BcryptPasswordHasher, JwtTokenIssuer
from src.domain.ports import AccountRepository
from src.domain.registration import RegistrationService

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def service_for(
    password_hasher: BcryptPasswordHasher, token_issuer: JwtTokenIssuer
) -> Callable[[AccountRepository], RegistrationService]:
    """Build a registration service over the given repository."""

    def build(repository: AccountRepository) -> RegistrationService:
        return RegistrationService(
            repository=repository,
            password_hasher=password_hasher,
            token_issuer=token_issuer,
        )

    return build

