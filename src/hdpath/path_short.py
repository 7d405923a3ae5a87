"""
Short HD path, without the change element

m / purpose' / coin_type' / account' / index

e.g. m/44'/60'/0'/0 as used by some Ethereum wallets
"""
import functools
from typing import Optional
from typing import Union

from hdpath import codec
from hdpath.base import check_fields
from hdpath.base import check_structure
from hdpath.base import HDPath
from hdpath.path_custom import CustomHDPath
from hdpath.path_value import PathValue
from hdpath.purpose import Purpose

HARDENED = (True, True, True, False)


@functools.total_ordering
class ShortHDPath(HDPath):
    def __init__(
        self,
        purpose: Union[Purpose, int],
        coin_type: int,
        account: int,
        index: int,
    ):
        self._purpose = check_fields(
            purpose, coin_type=coin_type, account=account, index=index
        )
        self._coin_type = coin_type
        self._account = account
        self._index = index

    @classmethod
    def from_custom(cls, path: HDPath) -> "ShortHDPath":
        values = check_structure(path, HARDENED)
        purpose = Purpose.from_value(values[0])
        return cls(purpose, *[value.as_number() for value in values[1:]])

    @classmethod
    def parse(cls, text: str) -> "ShortHDPath":
        return cls.from_custom(CustomHDPath.parse(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "ShortHDPath":
        return cls.from_custom(
            CustomHDPath(codec.decode(data, expected_length=len(HARDENED)))
        )

    @property
    def purpose(self) -> Purpose:
        return self._purpose

    @property
    def coin_type(self) -> int:
        return self._coin_type

    @property
    def account(self) -> int:
        return self._account

    @property
    def index(self) -> int:
        return self._index

    def account_path(self):
        from hdpath.path_account import AccountHDPath

        return AccountHDPath(self._purpose, self._coin_type, self._account)

    def __len__(self) -> int:
        return len(HARDENED)

    def get(self, pos: int) -> Optional[PathValue]:
        if pos == 0:
            return self._purpose.as_value()
        elif pos == 1:
            return PathValue.hardened(self._coin_type)
        elif pos == 2:
            return PathValue.hardened(self._account)
        elif pos == 3:
            return PathValue.normal(self._index)
        return None

    def _key(self):
        return self._purpose.code, self._coin_type, self._account, self._index

    def __eq__(self, other):
        if not isinstance(other, ShortHDPath):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, ShortHDPath):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"<ShortHDPath {self.to_string()}>"
