from __future__ import annotations

import hashlib
import hmac
from typing import Protocol

from werkzeug.security import check_password_hash, generate_password_hash


class PasswordHasher(Protocol):
    """Turns plaintext passwords into stored digests and checks them."""

    def hash(self, password: str) -> str:
        raise NotImplementedError

    def verify(self, digest: str, password: str) -> bool:
        raise NotImplementedError


class LegacyPasswordHasher:
    """Unsalted MD5 hex digest.

    Weak (no salt, fast hash), kept only so digests already stored in the
    Users table keep working.
    """

    name = "legacy"

    def hash(self, password: str) -> str:
        return hashlib.md5(password.encode("utf-8")).hexdigest()

    def verify(self, digest: str, password: str) -> bool:
        if not digest:
            return False
        return hmac.compare_digest(digest.lower(), self.hash(password))


class WerkzeugPasswordHasher:
    """Salted hashes produced by werkzeug (scrypt/pbkdf2)."""

    name = "strong"

    def hash(self, password: str) -> str:
        return generate_password_hash(password)

    def verify(self, digest: str, password: str) -> bool:
        try:
            return check_password_hash(digest, password)
        except ValueError:
            # e.g. legacy MD5 digests or placeholders like 'CHANGE_ME'
            return False


_HASHERS = {
    LegacyPasswordHasher.name: LegacyPasswordHasher,
    WerkzeugPasswordHasher.name: WerkzeugPasswordHasher,
}


def build_hasher(name: str) -> PasswordHasher:
    try:
        return _HASHERS[name.strip().lower()]()
    except KeyError:
        raise ValueError(f"Unknown password hasher {name!r}; expected one of {sorted(_HASHERS)}")
