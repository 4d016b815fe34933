"""
PostgreSQL repository adapter - Implements AccountRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Uniqueness Design:
------------------
The accounts table carries a unique index on lower(email). exists_by_email
is only a fast path for the registration service; two concurrent
registrations can both pass it. The losing INSERT then fails with
UniqueViolation, which save() translates into DuplicateEmail.

Phones are rows tagged with their account id and an ordinal position,
inserted in the same transaction as the account and read back ordered
by position.
"""

import logging
from pathlib import Path
from uuid import UUID

from psycopg import errors
from psycopg_pool import ConnectionPool

from src.domain.account import Account, NewAccount, Phone
from src.domain.exceptions import DuplicateEmail

logger = logging.getLogger(__name__)


class PostgresAccountRepository:
    """
    Implements AccountRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries for security.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def exists_by_email(self, email: str) -> bool:
        sql = "SELECT EXISTS (SELECT 1 FROM accounts WHERE lower(email) = lower(%s))"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (email,))
            row = cursor.fetchone()
            return bool(row[0])

    def save(self, account: NewAccount) -> Account:
        """
        Insert the account and its phones in one transaction.

        NOW() is fixed for the transaction, so created_at, modified_at and
        last_login_at receive the same instant.

        Args:
            account: Unsaved account aggregate

        Returns:
            The stored account with database-assigned id and timestamps

        Raises:
            DuplicateEmail: If the lower(email) unique index rejects the insert
        """
        account_sql = """
            INSERT INTO accounts (name, email, password_hash, token, is_active,
                                  created_at, modified_at, last_login_at)
            VALUES (%s, %s, %s, %s, %s, NOW(), NOW(), NOW())
            RETURNING id, created_at, modified_at, last_login_at
        """

        phone_sql = """
            INSERT INTO phones (account_id, position, number, city_code, country_code)
            VALUES (%s, %s, %s, %s, %s)
        """

        try:
            with self._pool.connection() as conn, conn.cursor() as cursor:
                cursor.execute(
                    account_sql,
                    (
                        account.name,
                        account.email,
                        account.credential_hash,
                        account.token,
                        account.active,
                    ),
                )
                account_id, created_at, modified_at, last_login_at = cursor.fetchone()
                cursor.executemany(
                    phone_sql,
                    [
                        (account_id, position, phone.number, phone.city_code, phone.country_code)
                        for position, phone in enumerate(account.phones)
                    ],
                )
                conn.commit()
        except errors.UniqueViolation as e:
            raise DuplicateEmail(account.email) from e

        return Account(
            id=account_id,
            name=account.name,
            email=account.email,
            credential_hash=account.credential_hash,
            token=account.token,
            created_at=created_at,
            modified_at=modified_at,
            last_login_at=last_login_at,
            active=account.active,
            phones=tuple(account.phones),
        )

    def find_by_id(self, account_id: UUID) -> Account | None:
        account_sql = """
            SELECT id, name, email, password_hash, token, is_active,
                   created_at, modified_at, last_login_at
            FROM accounts
            WHERE id = %s
        """

        phone_sql = """
            SELECT number, city_code, country_code
            FROM phones
            WHERE account_id = %s
            ORDER BY position
        """

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(account_sql, (account_id,))
            row = cursor.fetchone()
            if row is None:
                return None
            cursor.execute(phone_sql, (account_id,))
            phones = tuple(
                Phone(number=number, city_code=city_code, country_code=country_code)
                for number, city_code, country_code in cursor.fetchall()
            )

        return Account(
            id=row[0],
            name=row[1],
            email=row[2],
            credential_hash=row[3],
            token=row[4],
            active=row[5],
            created_at=row[6],
            modified_at=row[7],
            last_login_at=row[8],
            phones=phones,
        )


def run_migrations(pool: ConnectionPool) -> None:
    """
    Execute all SQL migration files from the migrations directory.

    Migrations are executed in sorted order (alphabetically by filename).
    Each migration should be idempotent (use IF NOT EXISTS, etc.).

    Args:
        pool: psycopg3 ConnectionPool instance
    """
    # Structure: src/adapters/repository/postgres.py -> migrations/
    migrations_dir = Path(__file__).parent.parent.parent.parent / "migrations"

    if not migrations_dir.exists():
        logger.warning(f"Migrations directory not found: {migrations_dir}")
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))

    if not sql_files:
        logger.info("No migration files found")
        return

    logger.info(f"Running {len(sql_files)} migration(s)")

    for sql_file in sql_files:
        logger.info(f"Executing migration: {sql_file.name}")
        try:
            sql_content = sql_file.read_text()

            with pool.connection() as conn:
                conn.execute(sql_content)

            logger.info(f"Migration complete: {sql_file.name}")
        except Exception as e:
            logger.error(f"Migration failed: {sql_file.name} - {e}")
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
