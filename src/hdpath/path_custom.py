"""
HD path of any length (up to 255), with normal and hardened elements in any order

https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki#the-default-wallet-layout
"""
from typing import Iterable
from typing import Iterator
from typing import Optional

from hdpath import codec
from hdpath import grammar
from hdpath.base import HDPath
from hdpath.errors import InvalidLengthError
from hdpath.path_value import PathValue


class CustomHDPath(HDPath):
    """
    >>> str(CustomHDPath.parse("M/44H/0H/1H/0/0"))
    "m/44'/0'/1'/0/0"
    >>> len(CustomHDPath([PathValue.hardened(1), PathValue.normal(2)]))
    2
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[PathValue] = ()):
        values = tuple(values)
        if len(values) > codec.MAX_DEPTH:
            # depth must fit in a single byte
            raise InvalidLengthError(len(values))
        self._values = values

    @classmethod
    def parse(cls, text: str) -> "CustomHDPath":
        return cls(grammar.parse(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "CustomHDPath":
        return cls(codec.decode(data))

    def __len__(self) -> int:
        return len(self._values)

    def get(self, pos: int) -> Optional[PathValue]:
        if 0 <= pos < len(self._values):
            return self._values[pos]
        return None

    def values(self):
        return list(self._values)

    def __iter__(self) -> Iterator[PathValue]:
        return iter(self._values)

    def __eq__(self, other):
        if not isinstance(other, CustomHDPath):
            return NotImplemented
        return self._values == other._values

    def __hash__(self):
        return hash(self._values)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"<CustomHDPath {self.to_string()}>"
