"""
HD path binary serialization

[count: 1 byte][child number: 4 bytes big endian] * count
"""
from typing import Iterable
from typing import List
from typing import Optional

from hdpath.errors import InvalidFormatError
from hdpath.errors import InvalidLengthError
from hdpath.path_value import PathValue

MAX_DEPTH = 0xFF


def ser_32(i: int) -> bytes:
    """
    Serialize i as 32 bits big endian
    """
    return i.to_bytes(4, "big")


def parse_32(data: bytes) -> int:
    return int.from_bytes(data, "big")


def encode(values: Iterable[PathValue]) -> bytes:
    """
    >>> encode([PathValue.hardened(44), PathValue.normal(1)]).hex()
    '028000002c00000001'
    """
    values = list(values)
    if len(values) > MAX_DEPTH:
        raise InvalidLengthError(len(values))
    return len(values).to_bytes(1, "big") + b"".join(
        ser_32(value.to_raw()) for value in values
    )


def decode(data: bytes, expected_length: Optional[int] = None) -> List[PathValue]:
    """
    Decode serialized path values

    Args:
        data: bytes, serialized path
        expected_length: Optional[int], number of elements required by the caller
    Raises:
        InvalidFormatError: data size does not match its count byte
        InvalidLengthError: count byte does not match expected_length
    """
    if not data:
        raise InvalidFormatError("empty data")
    count = data[0]
    if len(data) != 1 + 4 * count:
        raise InvalidFormatError(
            f"expected {1 + 4 * count} bytes for {count} elements, got {len(data)}"
        )
    if expected_length is not None and count != expected_length:
        raise InvalidLengthError(count)
    return [
        PathValue.from_raw(parse_32(data[1 + 4 * i : 5 + 4 * i])) for i in range(count)
    ]
