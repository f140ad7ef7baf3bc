"""Operation results and small hashing and sizing helpers."""

import enum
from dataclasses import dataclass

__all__ = [
    "ResultCode",
    "Result",
    "ResultError",
    "hash_combine",
    "calculate_full_mip_levels",
]

_MASK64 = (1 << 64) - 1


class ResultCode(enum.Enum):
    SUCCESS = 0
    ARGUMENT_OUT_OF_RANGE = 1
    RUNTIME_ERROR = 2


_DEFAULT_MESSAGES = {
    ResultCode.SUCCESS: "Success.",
    ResultCode.ARGUMENT_OUT_OF_RANGE: "Argument Out of Range.",
    ResultCode.RUNTIME_ERROR: "Runtime Error.",
}


class ResultError(RuntimeError):
    """Raised when a failed result is asserted to be successful."""

    def __init__(self, result: "Result") -> None:
        super().__init__(str(result))
        self.result = result


@dataclass(frozen=True)
class Result:
    """Outcome of an operation: a code and an optional message."""

    code: ResultCode
    message: str = ""

    def success(self) -> bool:
        return self.code is ResultCode.SUCCESS

    def __bool__(self) -> bool:
        return self.success()

    def __str__(self) -> str:
        return self.message or _DEFAULT_MESSAGES[self.code]

    def raise_for_error(self) -> "Result":
        """Return ``self`` on success, otherwise raise :class:`ResultError`."""
        if not self.success():
            raise ResultError(self)
        return self


def hash_combine(seed: int, value: object) -> int:
    """Mix the hash of ``value`` into ``seed`` and return the new 64-bit seed."""
    seed &= _MASK64
    h = hash(value) & _MASK64
    return (seed ^ (h + 0x9E3779B9 + (seed << 6) + (seed >> 2))) & _MASK64


def calculate_full_mip_levels(width: int, height: int, depth: int = 1) -> int:
    """Number of mip levels of a full chain for an image of the given size."""
    largest = max(width, height)
    if largest <= 0:
        raise ValueError("image dimensions must be positive")
    return largest.bit_length()