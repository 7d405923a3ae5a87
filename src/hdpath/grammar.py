"""
HD path text notation

path    := ("m/" | "M/") segment ("/" segment)*
segment := digit+ marker?
marker  := "'" | "H" | "h"

Parsing is a single left-to-right pass of a three-state scanner. Hardened
values are always written back with the apostrophe marker.
"""
import logging
from typing import Iterable
from typing import List
from typing import Union

from hdpath.errors import InvalidFormatError
from hdpath.errors import InvalidStructureError
from hdpath.path_value import is_ok
from hdpath.path_value import PathValue

log = logging.getLogger(__name__)

# scanner states
AWAITING_DIGIT = 0
IN_NUMBER = 1
JUST_MARKED = 2

STATE_NAMES = {
    AWAITING_DIGIT: "AWAITING_DIGIT",
    IN_NUMBER: "IN_NUMBER",
    JUST_MARKED: "JUST_MARKED",
}

ROOTS = b"mM"
DIGITS = b"0123456789"
MARKERS = b"'Hh"
SEPARATOR = ord("/")


def _close(number: int, hardened: bool, pos: int) -> PathValue:
    if not is_ok(number):
        raise InvalidFormatError(f"value out of range at position {pos}: {number}")
    return PathValue(number, hardened=hardened)


def parse(text: Union[str, bytes]) -> List[PathValue]:
    """
    Parse path notation into list of PathValue

    >>> parse("m/44'/0'/0'/0/1")
    [PathValue.hardened(44), PathValue.hardened(0), PathValue.hardened(0), PathValue.normal(0), PathValue.normal(1)]

    Args:
        text: str, e.g. m/44'/0'/0'/0/1 or M/44H/0H/0H/0/1
    Raises:
        InvalidFormatError: text does not match the notation
        InvalidStructureError: root without any path element
    """
    if isinstance(text, str):
        try:
            data = text.encode("ascii")
        except UnicodeEncodeError as err:
            raise InvalidFormatError(f"non-ascii path: {text!r}") from err
    else:
        data = bytes(text)
    if len(data) < 2:
        raise InvalidFormatError(f"path too short: {text!r}")
    if data[0] not in ROOTS or data[1] != SEPARATOR:
        raise InvalidFormatError(f"path must start with m/ or M/: {text!r}")

    values = []
    number = 0
    state = AWAITING_DIGIT
    for pos in range(2, len(data)):
        byte = data[pos]
        if byte in DIGITS:
            if state == JUST_MARKED:
                raise InvalidFormatError(f"digit after hardened marker at position {pos}")
            state = IN_NUMBER
            number = number * 10 + byte - DIGITS[0]
            continue
        if byte in MARKERS:
            if state != IN_NUMBER:
                raise InvalidFormatError(f"unexpected hardened marker at position {pos}")
            values.append(_close(number, True, pos))
            state = JUST_MARKED
        elif byte == SEPARATOR:
            if state == AWAITING_DIGIT:
                raise InvalidFormatError(f"empty path element at position {pos}")
            if state == IN_NUMBER:
                values.append(_close(number, False, pos))
            state = AWAITING_DIGIT
        else:
            raise InvalidFormatError(f"unexpected character at position {pos}: {chr(byte)!r}")
        number = 0
        log.trace("%r at %d -> %s", chr(byte), pos, STATE_NAMES[state])

    if state == AWAITING_DIGIT:
        raise InvalidFormatError(f"path ends with separator: {text!r}")
    if state == IN_NUMBER:
        values.append(_close(number, False, len(data)))
    if not values:
        raise InvalidStructureError(f"empty path: {text!r}")
    return values


def to_string(values: Iterable[PathValue]) -> str:
    """
    >>> to_string([PathValue.hardened(84), PathValue.normal(7)])
    "m/84'/7"
    """
    return "m" + "".join(f"/{value}" for value in values)
