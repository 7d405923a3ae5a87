"""
Parse, format, and serialize BIP32 HD paths, e.g. m/44'/0'/0'/0/0

Supported standards:
https://github.com/bitcoin/bips/blob/master/bip-0032.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0043.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0044.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0049.mediawiki
https://github.com/bitcoin/bips/blob/master/bip-0084.mediawiki

Key derivation is not implemented here, see hdpath.integrations
"""
__version__ = "0.1.0"

import logging
import os
import sys
import typing

from hdpath.errors import HDPathError
from hdpath.errors import HighBitIsSetError
from hdpath.errors import InvalidFieldError
from hdpath.errors import InvalidFormatError
from hdpath.errors import InvalidLengthError
from hdpath.errors import InvalidPurposeError
from hdpath.errors import InvalidStructureError

logging.TRACE = logging.DEBUG - 1
logging.addLevelName(logging.TRACE, "TRACE")


class Logger(logging.getLoggerClass()):
    def trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(logging.TRACE):
            self._log(logging.TRACE, msg, args, **kwargs)


logging.setLoggerClass(Logger)


def init_logging(log_level: str) -> logging.Logger:
    """
    Attach a StreamHandler at log_level to the hdpath logger, replacing any
    handler from a previous call

    Args:
        log_level: str, e.g. "trace", "debug" or "error"
    """
    log = logging.getLogger(__name__)
    log.setLevel(logging.TRACE)
    for handler in list(log.handlers):
        log.removeHandler(handler)
    sh = logging.StreamHandler()
    sh.setFormatter(
        logging.Formatter("[%(asctime)s] %(levelname)s [%(name)s] %(message)s")
    )
    sh.setLevel(getattr(logging, log_level.upper()))
    log.addHandler(sh)
    return log


def read_bytes(
    file_: typing.Optional[typing.IO] = None, input_format: str = "raw"
) -> bytes:
    """
    Read serialized path from file_, or stdin

    hex and bin text is stripped of surrounding whitespace and left-zero-padded
    to whole bytes, raw is read as is.

    Args:
        file_: Optional[IO], text file object, stdin if None
        input_format: str, "raw", "hex", or "bin"
    Raises:
        InvalidFormatError: text is not valid hex / bin
    """
    stream = file_ if file_ is not None else sys.stdin
    if input_format == "raw":
        return stream.buffer.read()
    if input_format not in ("hex", "bin"):
        raise ValueError(f"unrecognized input format: {input_format}")
    try:
        text = stream.read().strip()
        if input_format == "hex":
            return bytes.fromhex("0" * (len(text) % 2) + text)
        return int(text, 2).to_bytes((len(text) + 7) // 8, "big")
    except (ValueError, OverflowError) as err:
        raise InvalidFormatError(f"invalid {input_format} input") from err


def write_bytes(
    data: bytes,
    file_: typing.Optional[typing.IO] = None,
    output_format: str = "raw",
):
    """
    Write serialized path to file_, or stdout. hex and bin are written as a line
    of text

    Args:
        data: bytes, serialized path
        file_: Optional[IO], text file object, stdout if None
        output_format: str, "raw", "hex", or "bin"
    """
    stream = file_ if file_ is not None else sys.stdout
    if output_format == "raw":
        stream.buffer.write(data)
    elif output_format == "hex":
        stream.write(data.hex() + os.linesep)
    elif output_format == "bin":
        stream.write("".join(f"{byte:08b}" for byte in data) + os.linesep)
    else:
        raise ValueError(f"unrecognized output format: {output_format}")


# path modules log through Logger, so they are imported after setLoggerClass
from hdpath.base import HDPath  # noqa: E402
from hdpath.path_account import AccountHDPath  # noqa: E402
from hdpath.path_custom import CustomHDPath  # noqa: E402
from hdpath.path_short import ShortHDPath  # noqa: E402
from hdpath.path_standard import StandardHDPath  # noqa: E402
from hdpath.path_value import PathValue  # noqa: E402
from hdpath.purpose import Purpose  # noqa: E402
