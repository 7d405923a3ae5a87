"""
Single HD path element, a Normal or Hardened 31-bit value

https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#conventions
"""
import functools
from typing import Tuple

from hdpath.errors import HighBitIsSetError

HARDENED_OFFSET = 0x80000000
MAX_RAW = 0xFFFFFFFF


def is_ok(value: int) -> bool:
    """
    True if value is an int that fits in 31 bits, i.e. may be used as normal or
    hardened index

    >>> is_ok(44), is_ok(0x80000000), is_ok(1.5)
    (True, False, False)
    """
    return isinstance(value, int) and 0 <= value < HARDENED_OFFSET


@functools.total_ordering
class PathValue:
    """
    Path element. Normal values sort before hardened ones, then by number
    """

    __slots__ = ("_number", "_hardened")

    def __init__(self, number: int, hardened: bool = False):
        if not is_ok(number):
            raise HighBitIsSetError(number)
        self._number = number
        self._hardened = hardened

    @classmethod
    def normal(cls, number: int) -> "PathValue":
        return cls(number, hardened=False)

    @classmethod
    def hardened(cls, number: int) -> "PathValue":
        return cls(number, hardened=True)

    @classmethod
    def from_raw(cls, raw: int) -> "PathValue":
        """
        Decode 32-bit raw child number, e.g. 0x8000002c -> 44'

        Any 32-bit unsigned int is a valid raw value
        """
        if not isinstance(raw, int) or not 0 <= raw <= MAX_RAW:
            raise ValueError(f"raw value out of 32-bit range: {raw}")
        if raw >= HARDENED_OFFSET:
            return cls(raw - HARDENED_OFFSET, hardened=True)
        return cls(raw, hardened=False)

    @property
    def is_hardened(self) -> bool:
        return self._hardened

    def as_number(self) -> int:
        return self._number

    def to_raw(self) -> int:
        if self._hardened:
            return self._number + HARDENED_OFFSET
        return self._number

    def as_pair(self) -> Tuple[bool, int]:
        return self._hardened, self._number

    def __eq__(self, other):
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.as_pair() == other.as_pair()

    def __lt__(self, other):
        if not isinstance(other, PathValue):
            return NotImplemented
        return self.as_pair() < other.as_pair()

    def __hash__(self):
        return hash(self.as_pair())

    def __str__(self):
        return f"{self._number}'" if self._hardened else str(self._number)

    def __repr__(self):
        kind = "hardened" if self._hardened else "normal"
        return f"PathValue.{kind}({self._number})"
