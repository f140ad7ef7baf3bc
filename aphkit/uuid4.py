"""Random (version 4) UUIDs stored as 16 raw bytes."""

import random
import re
from functools import total_ordering

__all__ = ["UUID", "UUIDGenerator"]

_MASK64 = (1 << 64) - 1
_SIZE = 16
_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

# Masks forcing version 4 and variant 1 on the two 64-bit halves.
_LOW_AND = 0xFF0FFFFFFFFFFFFF
_LOW_OR = 0x0040000000000000
_HIGH_AND = 0xFFFFFFFFFFFFFF3F
_HIGH_OR = 0x0000000000000080


@total_ordering
class UUID:
    """A 128-bit identifier held as 16 bytes in memory order."""

    __slots__ = ("_data",)

    def __init__(self, data: bytes = bytes(_SIZE)) -> None:
        data = bytes(data)
        if len(data) != _SIZE:
            raise ValueError(f"a UUID needs exactly {_SIZE} bytes, got {len(data)}")
        self._data = data

    @classmethod
    def from_string(cls, text: str) -> "UUID":
        """Parse the 8-4-4-4-12 hexadecimal form."""
        text = text.strip()
        if not _PATTERN.fullmatch(text):
            raise ValueError(f"not a UUID string: {text!r}")
        return cls(bytes.fromhex(text.replace("-", "")))

    @classmethod
    def from_bytes(cls, data: bytes) -> "UUID":
        """Build a UUID from its 16-byte serialised form."""
        return cls(data)

    def to_bytes(self) -> bytes:
        """Serialise the UUID to 16 bytes."""
        return self._data

    def _halves(self) -> tuple[int, int]:
        return (
            int.from_bytes(self._data[:8], "little"),
            int.from_bytes(self._data[8:], "little"),
        )

    def __str__(self) -> str:
        h = self._data.hex()
        return f"{h[:8]}-{h[8:12]}-{h[12:16]}-{h[16:20]}-{h[20:]}"

    def __repr__(self) -> str:
        return f"UUID('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._data == other._data

    def __lt__(self, other: "UUID") -> bool:
        if not isinstance(other, UUID):
            return NotImplemented
        return self._halves() < other._halves()

    def __hash__(self) -> int:
        a, b = self._halves()
        return a ^ ((b + 0x9E3779B9 + (a << 6) + (a >> 2)) & _MASK64)


class UUIDGenerator:
    """Produces version 4 UUIDs from a pseudo-random source."""

    def __init__(self, seed: int | None = None, rng: random.Random | None = None) -> None:
        if seed is not None and rng is not None:
            raise ValueError("give either a seed or a random generator, not both")
        self._rng = rng if rng is not None else random.Random(seed)

    def generate(self) -> UUID:
        """Return a fresh random UUID with version 4 and variant 1 set."""
        high = self._rng.getrandbits(64)
        low = self._rng.getrandbits(64)
        low = (low & _LOW_AND) | _LOW_OR
        high = (high & _HIGH_AND) | _HIGH_OR
        return UUID(low.to_bytes(8, "little") + high.to_bytes(8, "little"))