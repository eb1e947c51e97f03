"""
Password hashing with bcrypt (per-hash random salt).

bcrypt only reads 72 bytes of input and bcrypt>=5 rejects anything longer,
so the password is reduced to a 64-char sha256 hex digest first. Every
password length, including multibyte text, is accepted and no suffix is
silently dropped.
"""

from __future__ import annotations

import hashlib

import bcrypt

BCRYPT_ROUNDS = 10


def _prehash(password: str) -> bytes:
    return hashlib.sha256(password.encode("utf-8")).hexdigest().encode("ascii")


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(_prehash(password), bcrypt.gensalt(rounds=rounds)).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time check against a bcrypt hash; malformed hashes never match."""
    try:
        return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False
