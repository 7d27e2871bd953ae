"""Base64 text encoding of byte payloads and parsing of decimal text.

The roots in a polynomial document are stored as the Base64 encoding of their
plain decimal text, e.g. the root ``5`` is stored as ``"NQ=="``.

>>> encode(b"5")
'NQ=='
>>> decode_text("NQ==")
'5'
>>> parse_decimal("5")
5.0
"""

import base64
import logging
import math
import re

from .exceptions import DecodeError, NumberFormatError

logger = logging.getLogger(__name__)

_DECIMAL = re.compile(
    r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*", flags=re.ASCII
)


def encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode(text: str) -> bytes:
    """Decode standard alphabet Base64 text.

    Characters outside the alphabet and incorrect padding are rejected
    rather than silently discarded.
    """
    try:
        return base64.b64decode(text, validate=True)
    except ValueError as err:
        # binascii.Error, and non-ascii str input, are both ValueErrors
        raise DecodeError(f"Invalid base64 text {text!r}: {err}") from err


def decode_text(text: str) -> str:
    payload = decode(text)
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as err:
        raise DecodeError(
            f"Decoded payload of {text!r} is not valid UTF-8 text"
        ) from err


def parse_decimal(text: str) -> float:
    """Parse plain decimal text, optionally with an exponent.

    Python literal forms such as "1_0", "nan" and "inf" are not decimal
    text and are rejected, as are values too large for a float.
    """
    if not _DECIMAL.fullmatch(text):
        raise NumberFormatError(f"Could not parse {text!r} as a number")
    value = float(text)
    if not math.isfinite(value):
        raise NumberFormatError(f"{text!r} is out of range for a number")
    logger.debug(f"Parsed {text!r} as {value}")
    return value
