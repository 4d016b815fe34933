"""
Account aggregate - the persisted user entity and its owned phones.

Phones have no identity of their own: they are stored inline in the
aggregate as an ordered tuple and live exactly as long as their account.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from .exceptions import ValidationFailure

PHONES_REQUIRED_MESSAGE = "Al menos un teléfono es requerido"


@dataclass(frozen=True)
class Phone:
    """Contact phone owned by a single account."""

    number: str
    city_code: str
    country_code: str


@dataclass(frozen=True)
class NewAccount:
    """Account built by the registration service, not yet persisted.

    The repository assigns ``id`` and the three timestamps on save.
    An account owns at least one phone; an empty tuple is rejected.
    """

    name: str
    email: str
    credential_hash: str = field(repr=False)
    token: str
    phones: tuple[Phone, ...]
    active: bool = True

    def __post_init__(self) -> None:
        if not self.phones:
            raise ValidationFailure(PHONES_REQUIRED_MESSAGE, "phones")


@dataclass(frozen=True)
class Account:
    """Aggregate root for a registered user."""

    id: UUID
    name: str
    email: str
    credential_hash: str = field(repr=False)
    token: str
    created_at: datetime
    modified_at: datetime
    last_login_at: datetime
    active: bool
    phones: tuple[Phone, ...]


@dataclass(frozen=True)
class AccountView:
    """Outward projection of an account. Never carries the credential hash."""

    id: UUID
    name: str
    email: str
    created: datetime
    modified: datetime
    last_login: datetime
    token: str
    is_active: bool
    phones: tuple[Phone, ...]

    @classmethod
    def from_account(cls, account: Account) -> "AccountView":
        return cls(
            id=account.id,
            name=account.name,
            email=account.email,
            created=account.created_at,
            modified=account.modified_at,
            last_login=account.last_login_at,
            token=account.token,
            is_active=account.active,
            phones=tuple(
                Phone(
                    number=phone.number,
                    city_code=phone.city_code,
                    country_code=phone.country_code,
                )
                for phone in account.phones
            ),
        )
