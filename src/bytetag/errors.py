"""Custom exception hierarchy for bytetag parsing and substitution errors."""


class ByteTagError(Exception):
    """Base exception for all recoverable bytetag errors."""


class EmptyInputError(ByteTagError):
    """Raised when an operation receives a zero-length sequence or mapping."""


class EmptySourceError(ByteTagError):
    """Raised when a loaded text sample is empty."""

    def __init__(self, message: str = "empty source", *, path: str | None = None) -> None:
        if path:
            message = f"{message} (path: {path})"
        super().__init__(message)
        self.path = path


class NotEnoughTagsError(ByteTagError):
    """Raised when the tag alphabet is smaller than the source sequence."""

    def __init__(
        self,
        message: str = "not enough tags",
        *,
        required: int | None = None,
        available: int | None = None,
    ) -> None:
        """Initialize with optional sizes that get appended to the message."""
        extra = " "
        if required is not None:
            extra += f"(required: {required}) "
        if available is not None:
            extra += f"(available: {available}) "
        super().__init__((message + extra).rstrip())
        self.required = required
        self.available = available


class ParseError(ByteTagError):
    """Raised when a token cannot be read as a byte under the given radix."""

    def __init__(
        self,
        message: str,
        *,
        token: str | None = None,
        position: int | None = None,
        radix: int | None = None,
    ) -> None:
        """
        Initialize ParseError with token details.

        Args:
            message: Error message.
            token: The offending token text.
            position: Zero-based index of the token in the input.
            radix: The numeric base the token was parsed under.
        """
        extra = " "
        if token is not None:
            extra += f"(token: {token!r}) "
        if position is not None:
            extra += f"(position: {position}) "
        if radix is not None:
            extra += f"(radix: {radix}) "
        super().__init__((message + extra).rstrip())
        self.token = token
        self.position = position
        self.radix = radix


class RadixError(ByteTagError):
    """Raised when a radix mode name is unknown."""

    def __init__(
        self,
        message: str,
        *,
        invalid_name: str | None = None,
        available_modes: list[str] | None = None,
    ) -> None:
        extra = " "
        if invalid_name:
            extra += f"(available: {available_modes}) (got {invalid_name}) "
        super().__init__((message + extra).rstrip())
        self.invalid_name = invalid_name
        self.available_modes = available_modes


class TagInvariantError(RuntimeError):
    """
    Raised when the tag alphabet runs dry during assignment.

    The capacity check in ``replace_with_tags`` makes this unreachable, so it
    signals a bug rather than bad input and is kept outside ``ByteTagError``.
    """


__all__ = [
    "ByteTagError",
    "EmptyInputError",
    "EmptySourceError",
    "NotEnoughTagsError",
    "ParseError",
    "RadixError",
    "TagInvariantError",
]
