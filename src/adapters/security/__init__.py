"""Security adapters - credential hashing and token signing."""

from .bcrypt_hasher import BcryptPasswordHasher
from .jwt_issuer import JwtTokenIssuer

__all__ = ["BcryptPasswordHasher", "JwtTokenIssuer"]
