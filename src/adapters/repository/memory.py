"""
In-memory repository adapter - Implements AccountRepository protocol.

Process-local store for development runs and tests. Uniqueness is
enforced by checking and inserting under one lock, so concurrent saves
for the same email cannot both succeed.
"""

import threading
import uuid
from datetime import datetime, timezone
from uuid import UUID

from src.domain.account import Account, NewAccount
from src.domain.exceptions import DuplicateEmail


def _email_key(email: str) -> str:
    return email.lower()


class InMemoryAccountRepository:
    """
    Implements AccountRepository protocol with dictionaries.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accounts: dict[UUID, Account] = {}
        self._ids_by_email: dict[str, UUID] = {}

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return _email_key(email) in self._ids_by_email

    def save(self, account: NewAccount) -> Account:
        key = _email_key(account.email)
        with self._lock:
            if key in self._ids_by_email:
                raise DuplicateEmail(account.email)

            now = datetime.now(timezone.utc)
            stored = Account(
                id=uuid.uuid4(),
                name=account.name,
                email=account.email,
                credential_hash=account.credential_hash,
                token=account.token,
                created_at=now,
                modified_at=now,
                last_login_at=now,
                active=account.active,
                phones=tuple(account.phones),
            )
            self._accounts[stored.id] = stored
            self._ids_by_email[key] = stored.id
        return stored

    def find_by_id(self, account_id: UUID) -> Account | None:
        with self._lock:
            return self._accounts.get(account_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
