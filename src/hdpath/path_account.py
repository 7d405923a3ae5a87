"""
Account-only HD path for BIP44, BIP49, BIP84 and similar

m / purpose' / coin_type' / account'

Not used to derive addresses directly, but to build address paths with
address_at(change, index). The unused change and index levels may be written
as x, i.e. m/84'/0'/0'/x/x
"""
import functools
import logging
from typing import Optional
from typing import Union

from hdpath import codec
from hdpath import path_short
from hdpath import path_standard
from hdpath.base import check_fields
from hdpath.base import check_structure
from hdpath.base import HDPath
from hdpath.path_custom import CustomHDPath
from hdpath.path_short import ShortHDPath
from hdpath.path_standard import StandardHDPath
from hdpath.path_value import PathValue
from hdpath.purpose import Purpose

log = logging.getLogger(__name__)

HARDENED = (True, True, True)
PLACEHOLDER = "/x/x"


@functools.total_ordering
class AccountHDPath(HDPath):
    """
    >>> account = AccountHDPath(Purpose.WITNESS, 0, 1)
    >>> str(account)
    "m/84'/0'/1'/x/x"
    >>> account.address_at(0, 7).to_string()
    "m/84'/0'/1'/0/7"
    """

    def __init__(self, purpose: Union[Purpose, int], coin_type: int, account: int):
        self._purpose = check_fields(purpose, coin_type=coin_type, account=account)
        self._coin_type = coin_type
        self._account = account

    @classmethod
    def from_custom(cls, path: HDPath) -> "AccountHDPath":
        """
        Raises:
            InvalidLengthError: path is not 3 elements long
            InvalidStructureError: path is not m/a'/b'/c'
        """
        values = check_structure(path, HARDENED)
        purpose = Purpose.from_value(values[0])
        return cls(purpose, values[1].as_number(), values[2].as_number())

    @classmethod
    def from_path(cls, path: Union[StandardHDPath, ShortHDPath]) -> "AccountHDPath":
        """
        Account of a standard or short path
        """
        return cls(path.purpose, path.coin_type, path.account)

    @classmethod
    def parse(cls, text: str) -> "AccountHDPath":
        """
        Parse m/84'/0'/0' or m/84'/0'/0'/x/x

        Full address paths, e.g. m/84'/0'/0'/0/1, are accepted when they are
        valid standard or short paths, and resolve to their account
        """
        if text.endswith(PLACEHOLDER):
            text = text[: -len(PLACEHOLDER)]
        path = CustomHDPath.parse(text)
        if len(path) == len(path_standard.HARDENED):
            log.debug(f"account of standard path {text}")
            return cls.from_path(StandardHDPath.from_custom(path))
        elif len(path) == len(path_short.HARDENED):
            log.debug(f"account of short path {text}")
            return cls.from_path(ShortHDPath.from_custom(path))
        return cls.from_custom(path)

    @classmethod
    def from_bytes(cls, data: bytes) -> "AccountHDPath":
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

    def address_at(self, change: int, index: int) -> StandardHDPath:
        """
        Path to an address within this account

        Raises:
            InvalidFieldError: change or index out of range
        """
        return StandardHDPath(
            self._purpose, self._coin_type, self._account, change, index
        )

    def __len__(self) -> int:
        return len(HARDENED)

    def get(self, pos: int) -> Optional[PathValue]:
        if pos == 0:
            return self._purpose.as_value()
        elif pos == 1:
            return PathValue.hardened(self._coin_type)
        elif pos == 2:
            return PathValue.hardened(self._account)
        return None

    def _key(self):
        return self._purpose.code, self._coin_type, self._account

    def __eq__(self, other):
        if not isinstance(other, AccountHDPath):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other):
        if not isinstance(other, AccountHDPath):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self):
        return hash(self._key())

    def __str__(self):
        return self.to_string() + PLACEHOLDER

    def __repr__(self):
        return f"<AccountHDPath {self.to_string()}>"
