"""
bcrypt password hasher - Implements PasswordHasher protocol.

Digests are standard bcrypt modular-crypt strings ($2b$<cost>$<salt><hash>,
60 characters), so the work factor and salt are recovered from the digest
itself at verification time. A fresh salt is generated on every call.

bcrypt only accepts 72 bytes of input and rejects longer values, which
70 characters of multi-byte text can exceed. The UTF-8 password is
therefore reduced to base64(SHA-256(password)) (44 ASCII bytes, no NUL)
before bcrypt sees it. No key or global salt is involved.
"""

import base64
import hashlib

import bcrypt

from src.domain.exceptions import ConfigurationFault

MIN_COST = 4
MAX_COST = 31


class BcryptPasswordHasher:
    """
    Implements PasswordHasher protocol via the bcrypt library.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, cost: int = 10) -> None:
        """
        Initialize hasher with a bcrypt work factor.

        Args:
            cost: bcrypt log2 rounds (4..31)

        Raises:
            ConfigurationFault: If cost is outside bcrypt's supported range
        """
        if not MIN_COST <= cost <= MAX_COST:
            raise ConfigurationFault(f"bcrypt cost must be between {MIN_COST} and {MAX_COST}")
        self._cost = cost

    def hash(self, raw: str) -> str:
        return bcrypt.hashpw(self._prepare(raw), bcrypt.gensalt(rounds=self._cost)).decode()

    def verify(self, raw: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(self._prepare(raw), digest.encode())
        except ValueError:
            # Not a bcrypt digest
            return False

    @staticmethod
    def _prepare(raw: str) -> bytes:
        return base64.b64encode(hashlib.sha256(raw.encode("utf-8")).digest())
