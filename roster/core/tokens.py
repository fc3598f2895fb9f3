"""Opaque 128-bit session tokens and the generator that issues them."""

import random
import re
import threading
from dataclasses import dataclass

TOKEN_BITS = 128
TOKEN_BYTES = TOKEN_BITS // 8
MAX_TOKEN_VALUE = (1 << TOKEN_BITS) - 1

_DECIMAL_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class SessionToken:
    """
    An unsigned 128-bit session credential.

    Travels in the user_token cookie as a decimal string and is stored in the
    sessions table as 16 little-endian bytes.
    """

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= MAX_TOKEN_VALUE:
            raise ValueError("session token must fit in 128 unsigned bits")

    @classmethod
    def parse(cls, cookie_value: str) -> "SessionToken":
        """Parse a cookie value; raises ValueError if it is not a u128 decimal."""
        if not _DECIMAL_RE.fullmatch(cookie_value):
            raise ValueError(f"not an unsigned decimal integer: {cookie_value!r}")
        return cls(int(cookie_value))

    def to_cookie_value(self) -> str:
        return str(self.value)

    def to_database_value(self) -> bytes:
        return self.value.to_bytes(TOKEN_BYTES, "little")


class TokenGenerator:
    """
    Thread-safe source of new session tokens.

    Wraps a random.Random-compatible source behind a lock; the lock is held
    only while drawing one 128-bit value. Defaults to the OS CSPRNG. Tests may
    pass a seeded random.Random for reproducible tokens.
    """

    def __init__(self, source: random.Random | None = None) -> None:
        self._source = source if source is not None else random.SystemRandom()
        self._lock = threading.Lock()

    def generate(self) -> SessionToken:
        with self._lock:
            value = self._source.getrandbits(TOKEN_BITS)
        return SessionToken(value)
