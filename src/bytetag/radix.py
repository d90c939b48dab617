"""Radix modes for parsing and rendering bytes."""

from enum import Enum
from typing import Final

from .errors import RadixError

_ALIASES: Final[dict[str, str]] = {
    "bin": "BINARY",
    "oct": "OCTAL",
    "dec": "DECIMAL",
    "hex": "HEXADECIMAL",
    "2": "BINARY",
    "8": "OCTAL",
    "10": "DECIMAL",
    "16": "HEXADECIMAL",
}


class _RadixMode(int, Enum):
    """Shared lookup for radix enums; the member value is the numeric base."""

    @classmethod
    def get(cls, name: "str | _RadixMode") -> "_RadixMode":
        """Get mode by name, short alias or base number (case-insensitive)."""
        if isinstance(name, cls):
            return name
        if isinstance(name, _RadixMode):
            return cls(name.value)
        key = str(name).strip().lower()
        try:
            return cls[_ALIASES.get(key, key.upper())]
        except KeyError:
            raise RadixError(
                f"unknown {cls.__name__}",
                invalid_name=str(name),
                available_modes=cls.list_modes(),
            ) from None

    @classmethod
    def list_modes(cls) -> list[str]:
        """Return available mode names."""
        return [mode.name.lower() for mode in cls]


class ConversionMode(_RadixMode):
    """Radix used when parsing text tokens into bytes."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


class PrintMode(_RadixMode):
    """Radix used when rendering bytes as text."""

    BINARY = 2
    OCTAL = 8
    DECIMAL = 10
    HEXADECIMAL = 16


def list_modes() -> list[str]:
    """Return names accepted by both ``ConversionMode.get`` and ``PrintMode.get``."""
    return ConversionMode.list_modes()


__all__ = ["ConversionMode", "PrintMode", "list_modes"]
