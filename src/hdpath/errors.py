"""
HD path errors

All errors derive from ValueError, so callers may catch either HDPathError
or plain ValueError
"""


class HDPathError(ValueError):
    pass


class HighBitIsSetError(HDPathError):
    """
    Value already carries the hardened bit where a plain 31-bit value is expected
    """

    def __init__(self, value: int):
        super().__init__(f"high bit is set: {value}")
        self.value = value


class InvalidLengthError(HDPathError):
    def __init__(self, length: int):
        super().__init__(f"invalid length: {length}")
        self.length = length


class InvalidPurposeError(HDPathError):
    def __init__(self, code: int):
        super().__init__(f"invalid purpose: {code}")
        self.code = code


class InvalidStructureError(HDPathError):
    pass


class InvalidFormatError(HDPathError):
    pass


class InvalidFieldError(HDPathError):
    """
    Raised by fixed-shape constructors for the first field out of range

    Attributes:
        field: str, field name, e.g. "coin_type"
        value: int, offending value
    """

    def __init__(self, field: str, value: int):
        super().__init__(f"invalid {field}: {value}")
        self.field = field
        self.value = value
