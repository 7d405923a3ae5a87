"""
BIP43 purpose, the first (hardened) element of an HD path

https://github.com/bitcoin/bips/blob/master/bip-0043.mediawiki

m / purpose' / *
"""
import functools

from hdpath.errors import HighBitIsSetError
from hdpath.errors import InvalidPurposeError
from hdpath.path_value import is_ok
from hdpath.path_value import PathValue

NAMES = {
    0: "none",
    44: "pubkey",  # BIP44
    49: "script_hash",  # BIP49
    84: "witness",  # BIP84
}


@functools.total_ordering
class Purpose:
    """
    Named purposes are available as Purpose.NONE, Purpose.PUBKEY,
    Purpose.SCRIPT_HASH and Purpose.WITNESS, any other code with Purpose.custom(code)

    Equality and ordering compare codes only, so Purpose.custom(44) == Purpose.PUBKEY
    """

    __slots__ = ("_code", "_name")

    NONE: "Purpose"
    PUBKEY: "Purpose"
    SCRIPT_HASH: "Purpose"
    WITNESS: "Purpose"

    def __init__(self, code: int, name: str = "custom"):
        self._code = code
        self._name = name

    @classmethod
    def custom(cls, code: int) -> "Purpose":
        """
        Custom purpose. Not range-checked here, so that shape constructors
        can report the field as invalid
        """
        return cls(code)

    @classmethod
    def from_code(cls, code: int) -> "Purpose":
        """
        >>> Purpose.from_code(84)
        Purpose.WITNESS
        >>> Purpose.from_code(101)
        Purpose.custom(101)
        """
        if code < 0:
            raise InvalidPurposeError(0)
        if code in (44, 49, 84):
            return cls(code, NAMES[code])
        if not is_ok(code):
            raise HighBitIsSetError(code)
        return cls(code)

    @classmethod
    def from_value(cls, value: PathValue) -> "Purpose":
        return cls.from_code(value.as_number())

    @property
    def code(self) -> int:
        return self._code

    @property
    def name(self) -> str:
        return self._name

    def as_value(self) -> PathValue:
        return PathValue.hardened(self._code)

    def __int__(self):
        return self._code

    def __eq__(self, other):
        if not isinstance(other, Purpose):
            return NotImplemented
        return self._code == other._code

    def __lt__(self, other):
        if not isinstance(other, Purpose):
            return NotImplemented
        return self._code < other._code

    def __hash__(self):
        return hash(self._code)

    def __str__(self):
        return f"{self._code}'"

    def __repr__(self):
        if self._name == "custom":
            return f"Purpose.custom({self._code})"
        return f"Purpose.{self._name.upper()}"


Purpose.NONE = Purpose(0, NAMES[0])
Purpose.PUBKEY = Purpose(44, NAMES[44])
Purpose.SCRIPT_HASH = Purpose(49, NAMES[49])
Purpose.WITNESS = Purpose(84, NAMES[84])
