"""
Common interface of all HD path types
"""
import abc
import logging
from typing import List
from typing import Optional
from typing import Sequence
from typing import Tuple
from typing import Union

from hdpath import codec
from hdpath import grammar
from hdpath.errors import InvalidFieldError
from hdpath.errors import InvalidLengthError
from hdpath.errors import InvalidStructureError
from hdpath.path_value import is_ok
from hdpath.path_value import PathValue
from hdpath.purpose import Purpose

log = logging.getLogger(__name__)


class HDPath(abc.ABC):
    """
    Implementations provide __len__ and get(), the rest is derived from them.
    See CustomHDPath, AccountHDPath, ShortHDPath and StandardHDPath
    """

    @abc.abstractmethod
    def __len__(self) -> int:
        pass

    @abc.abstractmethod
    def get(self, pos: int) -> Optional[PathValue]:
        """
        Element at pos, or None if pos is out of bounds
        """

    def values(self) -> List[PathValue]:
        return [self.get(i) for i in range(len(self))]

    def child_numbers(self) -> List[Tuple[bool, int]]:
        """
        Ordered (is_hardened, number) pairs, e.g. for external derivation libraries
        """
        return [value.as_pair() for value in self.values()]

    def to_bytes(self) -> bytes:
        """
        First byte is the number of elements, followed by 4-byte big endian
        child numbers
        """
        return codec.encode(self.values())

    def to_string(self) -> str:
        return grammar.to_string(self.values())

    def as_custom(self):
        from hdpath.path_custom import CustomHDPath

        return CustomHDPath(self.values())

    def parent(self):
        """
        Path without its last element
        Returns:
            CustomHDPath
        """
        from hdpath.path_custom import CustomHDPath

        values = self.values()
        if not values:
            raise InvalidLengthError(0)
        return CustomHDPath(values[:-1])


def check_fields(purpose: Union[Purpose, int], **fields: int) -> Purpose:
    """
    Check purpose and fields, in the given order, are within 31 bits

    Args:
        purpose: Union[Purpose, int], purpose or purpose code
        fields: field name -> value, e.g. coin_type=0, account=1
    Returns:
        Purpose
    Raises:
        InvalidFieldError: for the first field out of range
    """
    code = purpose.code if isinstance(purpose, Purpose) else purpose
    if not is_ok(code):
        raise InvalidFieldError("purpose", code)
    if not isinstance(purpose, Purpose):
        purpose = Purpose.from_code(code)
    for name, value in fields.items():
        if not is_ok(value):
            raise InvalidFieldError(name, value)
    return purpose


def check_structure(path: HDPath, hardened: Sequence[bool]) -> List[PathValue]:
    """
    Check path length and which elements are hardened

    Args:
        path: HDPath, path to check
        hardened: Sequence[bool], expected hardness of each element
    Returns:
        path values
    Raises:
        InvalidLengthError: path length differs
        InvalidStructureError: hardness of any element differs
    """
    if len(path) != len(hardened):
        raise InvalidLengthError(len(path))
    values = path.values()
    for pos, (value, expected) in enumerate(zip(values, hardened)):
        if value.is_hardened != expected:
            log.debug(f"element {pos} of {path.to_string()} hardened != {expected}")
            raise InvalidStructureError(
                f"{'hardened' if expected else 'normal'} value expected "
                + f"at position {pos}: {path.to_string()}"
            )
    return values
