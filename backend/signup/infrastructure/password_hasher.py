"""Password Hasher - PBKDF2-HMAC-SHA256 secret hashing via `cryptography`.

Invariants:
    - hash() never returns the plaintext and never fails for a str input
    - Each hash uses a fresh random salt: equal passwords produce different hashes
    - Encoded form is self-describing: pbkdf2_sha256$<iterations>$<salt_b64>$<hash_b64>
    - verify() returns False (never raises) for malformed or foreign hashes

Design Decisions:
    - Iteration count stored in the hash so it can be raised later without
      invalidating existing hashes
    - Constant-time comparison through PBKDF2HMAC.verify()
"""

import base64
import os

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

ALGORITHM = "pbkdf2_sha256"
SALT_BYTES = 16
KEY_LENGTH = 32


def _kdf(salt: bytes, iterations: int) -> PBKDF2HMAC:
    return PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=salt,
        iterations=iterations,
    )


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


class PasswordHasher:
    """SecretHasher implementation backed by PBKDF2."""

    def __init__(self, iterations: int = 600_000):
        if iterations < 1:
            raise ValueError("iterations must be positive")
        self.iterations = iterations

    def hash(self, plaintext: str) -> str:
        salt = os.urandom(SALT_BYTES)
        derived = _kdf(salt, self.iterations).derive(plaintext.encode("utf-8"))
        return f"{ALGORITHM}${self.iterations}${_b64(salt)}${_b64(derived)}"

    def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            algorithm, iterations, salt_b64, hash_b64 = hashed.split("$")
            if algorithm != ALGORITHM:
                return False
            salt = base64.b64decode(salt_b64, validate=True)
            expected = base64.b64decode(hash_b64, validate=True)
            kdf = _kdf(salt, int(iterations))
        except ValueError:
            return False
        try:
            kdf.verify(plaintext.encode("utf-8"), expected)
        except InvalidKey:
            return False
        return True
