# File: userhub/core/security.py

"""
Security helpers for the userhub API.

Three small pieces, each built from explicit configuration:

  - PasswordHasher: bcrypt hashing and verification of passwords
  - TokenIssuer:    signs a short-lived JWT for a user id + admin flag
  - TokenVerifier:  checks signature and expiry, returns the claims

Token verification is stateless: nothing here touches the user store.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
import jwt

from userhub.core.errors import ConfigurationError, InvalidTokenError, MissingTokenError

logger = logging.getLogger(__name__)

DEFAULT_HASH_ROUNDS = 10
DEFAULT_TOKEN_LIFETIME = timedelta(hours=1)
DEFAULT_ALGORITHM = "HS256"

# bcrypt only looks at the first 72 bytes of a password; newer releases
# raise instead of truncating, so we cut it ourselves.
BCRYPT_MAX_PASSWORD_BYTES = 72


def _password_bytes(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]


class PasswordHasher:
    """Salted, deliberately slow one-way hashing of passwords."""

    def __init__(self, rounds: int = DEFAULT_HASH_ROUNDS) -> None:
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_password_bytes(plaintext), salt).decode("ascii")

    def verify(self, plaintext: str, digest: Optional[str]) -> bool:
        """
        Check a candidate password against a stored digest.

        Returns False on mismatch and on a missing or malformed digest.
        """
        if not digest:
            return False
        try:
            return bcrypt.checkpw(_password_bytes(plaintext), digest.encode("ascii"))
        except ValueError:
            logger.warning("Stored password hash is malformed; treating as mismatch")
            return False


@dataclass(frozen=True)
class TokenClaims:
    subject_id: str
    is_admin: bool = False


def _require_secret(secret: Optional[str]) -> str:
    if not secret:
        raise ConfigurationError("Token signing secret is not configured (JWT_SECRET)")
    return secret


class TokenIssuer:
    def __init__(
        self,
        secret: Optional[str],
        *,
        lifetime: timedelta = DEFAULT_TOKEN_LIFETIME,
        algorithm: str = DEFAULT_ALGORITHM,
    ) -> None:
        self._secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def issue(self, subject_id: str, is_admin: bool = False) -> str:
        """
        Sign a token for ``subject_id``.

        Claims: ``userId``, ``isAdmin``, ``iat`` and ``exp`` (now + lifetime).
        Raises ConfigurationError when no signing secret is configured.
        """
        secret = _require_secret(self._secret)
        now = datetime.now(timezone.utc)
        payload = {
            "userId": str(subject_id),
            "isAdmin": bool(is_admin),
            "iat": now,
            "exp": now + self.lifetime,
        }
        return jwt.encode(payload, secret, algorithm=self.algorithm)


class TokenVerifier:
    def __init__(self, secret: Optional[str], *, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._secret = secret
        self.algorithm = algorithm

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode ``token`` and return its claims.

        Raises:
            MissingTokenError: no token was supplied.
            InvalidTokenError: bad signature, malformed, expired, or no subject.
        """
        if not token:
            raise MissingTokenError()
        secret = _require_secret(self._secret)

        try:
            payload = jwt.decode(
                token,
                secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId"]},
            )
        except jwt.PyJWTError as exc:
            logger.debug("Rejected token: %s", exc)
            raise InvalidTokenError() from exc

        subject_id = payload["userId"]
        if not isinstance(subject_id, str) or not subject_id:
            raise InvalidTokenError()

        return TokenClaims(subject_id=subject_id, is_admin=payload.get("isAdmin") is True)
