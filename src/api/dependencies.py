"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from src.adapters.security import BcryptPasswordHasher, JwtTokenIssuer
from src.config.settings import get_settings
from src.domain.ports import AccountRepository
from src.domain.registration import RegistrationService
from src.domain.validation import RegistrationValidator


def get_repository(request: Request) -> AccountRepository:
    """
    Get the account repository from app state.

    The repository is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.repository


def get_password_hasher() -> BcryptPasswordHasher:
    """Create bcrypt hasher with the configured work factor."""
    return BcryptPasswordHasher(cost=get_settings().bcrypt_cost)


def get_token_issuer() -> JwtTokenIssuer:
    """Create JWT issuer with the configured signing key and lifetime."""
    settings = get_settings()
    return JwtTokenIssuer(
        secret=settings.jwt_secret,
        expiration_seconds=settings.jwt_expiration_seconds,
    )


def get_registration_validator() -> RegistrationValidator:
    """Create validator from the configured email/password patterns."""
    settings = get_settings()
    return RegistrationValidator(
        email_pattern=settings.email_pattern,
        password_pattern=settings.password_pattern,
        password_max_length=settings.password_max_length,
    )


def get_registration_service(
    repository: AccountRepository = Depends(get_repository),
    password_hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    token_issuer: JwtTokenIssuer = Depends(get_token_issuer),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the repository, hasher and token issuer for the domain service.
    """
    return RegistrationService(
        repository=repository,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
    )
