"""
Standard HD path for BIP44, BIP49, BIP84 and similar

https://github.com/bitcoin/bips/blob/master/bip-0044.mediawiki

m / purpose' / coin_type' / account' / change / address_index
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

HARDENED = (True, True, True, False, False)


@functools.total_ordering
class StandardHDPath(HDPath):
    """
    >>> StandardHDPath(Purpose.WITNESS, 0, 1, 0, 101).to_string()
    "m/84'/0'/1'/0/101"
    >>> StandardHDPath.parse("m/44'/60'/0'/0/2").coin_type
    60

    Fields are checked in order purpose, coin_type, account, change, index;
    the first one out of range raises InvalidFieldError
    """

    def __init__(
        self,
        purpose: Union[Purpose, int],
        coin_type: int,
        account: int,
        change: int,
        index: int,
    ):
        self._purpose = check_fields(
            purpose, coin_type=coin_type, account=account, change=change, index=index
        )
        self._coin_type = coin_type
        self._account = account
        self._change = change
        self._index = index

    @classmethod
    def default(cls) -> "StandardHDPath":
        """
        m/44'/0'/0'/0/0
        """
        return cls(Purpose.PUBKEY, 0, 0, 0, 0)

    @classmethod
    def from_custom(cls, path: HDPath) -> "StandardHDPath":
        """
        Raises:
            InvalidLengthError: path is not 5 elements long
            InvalidStructureError: path is not m/a'/b'/c'/d/e
        """
        values = check_structure(path, HARDENED)
        purpose = Purpose.from_value(values[0])
        return cls(purpose, *[value.as_number() for value in values[1:]])

    @classmethod
    def parse(cls, text: str) -> "StandardHDPath":
        return cls.from_custom(CustomHDPath.parse(text))

    @classmethod
    def from_bytes(cls, data: bytes) -> "StandardHDPath":
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
    def change(self) -> int:
        return self._change

    @property
    def index(self) -> int:
        return self._index

    def account_path(self):
        """
        Returns:
            AccountHDPath, m/purpose'/coin_type'/account'
        """
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
            return PathValue.normal(self._change)
        elif pos == 4:
            return PathValue.normal(self._index)
        return None

    def _key(self):
        return (
            self._purpose.code,
            self._coin_type,
            self._account,
            self._change,
            self._index,
        )

    def __eq__(self, other):
        if not isinstance(other, StandardHDPath):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, StandardHDPath):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"<StandardHDPath {self.to_string()}>"
