"""
Utils for handing HD paths to external derivation libraries

Libraries such as bip32 (https://github.com/darosior/python-bip32) take a
derivation path as a list of 32-bit child numbers, e.g.

    from bip32 import BIP32
    BIP32.from_seed(seed).get_xpub_from_path(to_indexes(path))

Nothing here depends on such a library being installed.
"""
from typing import Iterable
from typing import List

from hdpath.base import HDPath
from hdpath.path_custom import CustomHDPath
from hdpath.path_value import HARDENED_OFFSET
from hdpath.path_value import PathValue


def to_indexes(path: HDPath) -> List[int]:
    """
    Child numbers of path, hardened ones offset by 2**31

    >>> to_indexes(CustomHDPath.parse("m/44'/0'/0'/0/5"))
    [2147483692, 2147483648, 2147483648, 0, 5]
    """
    return [
        number + HARDENED_OFFSET if hardened else number
        for hardened, number in path.child_numbers()
    ]


def from_indexes(indexes: Iterable[int]) -> CustomHDPath:
    """
    Inverse of to_indexes
    """
    return CustomHDPath(PathValue.from_raw(index) for index in indexes)


def to_bip32_str(path: HDPath, hardened_marker: str = "h") -> str:
    """
    Path notation with an alternate hardened marker, e.g. m/44h/0h/0h/0/5

    Args:
        path: HDPath
        hardened_marker: str, one of "'", "h", or "H"
    """
    if hardened_marker not in ("'", "h", "H"):
        raise ValueError(f"invalid hardened marker: {hardened_marker}")
    return "m" + "".join(
        f"/{number}{hardened_marker if hardened else ''}"
        for hardened, number in path.child_numbers()
    )
