"""
Password hashing helpers.

Passwords are hashed with PBKDF2‑HMAC‑SHA256 using a random salt and
stored as ``"<salt hex>$<hash hex>"``.  Records created by older
deployments hold a bare unsalted SHA‑256 hex digest; ``verify_password``
still accepts those so existing accounts can sign in.
"""

import hashlib
import hmac
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The result
    contains the salt and hash separated by ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a plain password against a stored hash.

    Returns ``False`` for malformed or missing stored values instead of
    raising.
    """
    if not isinstance(plain_password, str) or not isinstance(hashed_password, str):
        return False
    if "$" not in hashed_password:
        # Legacy unsalted SHA‑256 hex digest
        digest = hashlib.sha256(plain_password.encode("utf-8")).hexdigest()
        return hmac.compare_digest(digest, hashed_password)
    salt_hex, hash_hex = hashed_password.split("$", 1)
    try:
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
