"""
Text <-> byte conversion under a selectable radix.
"""

import logging
from typing import Final

import regex as re

from .errors import EmptyInputError, ParseError
from .radix import ConversionMode, PrintMode
from .types import Byte, ByteList

log = logging.getLogger(__name__)

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")

# optional plus sign followed by at least one digit valid for the radix
_DIGITS: Final[dict[ConversionMode, re.Pattern[str]]] = {
    ConversionMode.BINARY: re.compile(r"\+?[01]+"),
    ConversionMode.OCTAL: re.compile(r"\+?[0-7]+"),
    ConversionMode.DECIMAL: re.compile(r"\+?[0-9]+"),
    ConversionMode.HEXADECIMAL: re.compile(r"\+?[0-9a-fA-F]+"),
}

# most significant digits a byte can need in each radix
_MAX_DIGITS: Final[dict[ConversionMode, int]] = {
    ConversionMode.BINARY: 8,
    ConversionMode.OCTAL: 3,
    ConversionMode.DECIMAL: 3,
    ConversionMode.HEXADECIMAL: 2,
}


def split_tokens(text: str) -> list[str]:
    """Split text on runs of whitespace, dropping empty edges."""
    return [tok for tok in _WHITESPACE.split(text) if tok]


def _byte_from_str(token: str, mode: ConversionMode, position: int) -> Byte:
    """Parse a single token as an unsigned 8-bit value."""
    if _DIGITS[mode].fullmatch(token) is None:
        raise ParseError(
            "invalid digit for radix", token=token, position=position, radix=mode.value
        )
    digits = token.lstrip("+").lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS[mode] or int(digits, mode.value) > 0xFF:
        raise ParseError(
            "number too large to fit in a byte",
            token=token,
            position=position,
            radix=mode.value,
        )
    return int(digits, mode.value)


def parse_bytes(src: str, mode: ConversionMode | str) -> ByteList:
    """
    Parse whitespace-separated numeric tokens into bytes.

    :param src: Text holding one number per token.
    :param mode: Radix of every token, as a ``ConversionMode`` or its name.
    :returns: Parsed byte values in input order.
    :raises EmptyInputError: If ``src`` is an empty string.
    :raises ParseError: If a token is not a valid byte under ``mode``.
    :raises RadixError: If ``mode`` is an unknown name.
    """
    if not src:
        raise EmptyInputError("cannot parse bytes from empty text")
    mode = ConversionMode.get(mode)

    data = bytearray()
    for position, token in enumerate(split_tokens(src)):
        data.append(_byte_from_str(token, mode, position))

    log.debug(f"parsed {len(data)} bytes in {mode.name.lower()} mode")
    return bytes(data)


def print_byte(b: Byte, mode: PrintMode | str) -> str:
    """Render a single byte; binary is zero-padded to 8 digits."""
    if not 0 <= b <= 0xFF:
        raise ValueError(f"byte value out of range 0..255: {b}")
    match PrintMode.get(mode):
        case PrintMode.BINARY:
            return f"{b:08b}"
        case PrintMode.OCTAL:
            return f"{b:o}"
        case PrintMode.HEXADECIMAL:
            return f"{b:x}"
        case _:
            return f"{b}"


def print_bytes(src: ByteList | list[Byte], mode: PrintMode | str) -> str:
    """
    Render bytes as space-separated numbers.

    :raises EmptyInputError: If ``src`` is empty.
    :raises ValueError: If a value in ``src`` is outside 0..255.
    """
    if len(src) == 0:
        raise EmptyInputError("cannot print an empty byte list")
    mode = PrintMode.get(mode)
    return " ".join(print_byte(b, mode) for b in src)


__all__ = ["split_tokens", "parse_bytes", "print_byte", "print_bytes"]
