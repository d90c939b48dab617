"""
Tag alphabets and frequency-preserving tag substitution.

Every distinct source token is bound to one fresh tag on first sight, so the
substitution is injective and relabels counts without changing them.
"""

from collections.abc import Iterator, Sequence, Set
from dataclasses import dataclass, field
import logging

from .errors import EmptyInputError, NotEnoughTagsError, TagInvariantError
from .types import Tag, Token

log = logging.getLogger(__name__)

# marks a token with no tag yet
_UNSET = object()


@dataclass(frozen=True)
class TagAssignment:
    """Result of one substitution run."""

    tags: list[Tag]
    # distinct token -> tag, in first-occurrence order
    mapping: dict[Token, Tag] = field(default_factory=dict)

    @property
    def n_distinct(self) -> int:
        """Number of distinct tokens that received a tag."""
        return len(self.mapping)


def make_replace_list[T: (str, int)](start: T, end: T) -> frozenset[T]:
    """
    Build a tag alphabet holding every value from ``start`` to ``end`` inclusive.

    Characters step by code point and integers by one. An inverted range
    yields an empty alphabet.

    :param start: First value of the range (a single character or an int).
    :param end: Last value of the range, same type as ``start``.
    :raises TypeError: If the bounds are not both characters or both ints.
    :raises ValueError: If a string bound is not exactly one character.

    .. code-block:: python

        make_replace_list("a", "f")  # frozenset({'a', 'b', 'c', 'd', 'e', 'f'})
    """
    if isinstance(start, str) and isinstance(end, str):
        if len(start) != 1 or len(end) != 1:
            raise ValueError(
                f"tag range bounds must be single characters, got {start!r} and {end!r}"
            )
        return frozenset(chr(cp) for cp in range(ord(start), ord(end) + 1))

    if (
        isinstance(start, int)
        and isinstance(end, int)
        and not isinstance(start, bool)
        and not isinstance(end, bool)
    ):
        return frozenset(range(start, end + 1))

    raise TypeError(
        "tag range bounds must both be characters or both be ints, "
        f"got {type(start).__name__} and {type(end).__name__}"
    )


def _next_tag(tags: Iterator[Tag], token: Token) -> Tag:
    """Draw the next unused tag; running dry means the capacity check is broken."""
    try:
        return next(tags)
    except StopIteration:
        raise TagInvariantError(
            f"tag alphabet exhausted while assigning {token!r}"
        ) from None


def _tag_order(tags: Set[Tag]) -> list[Tag]:
    """Fixed enumeration of an alphabet: natural order, else by type name and repr."""
    try:
        return sorted(tags)
    except TypeError:
        return sorted(tags, key=lambda t: (type(t).__qualname__, repr(t)))


def assign_tags(src: Sequence[Token], tags: Set[Tag]) -> TagAssignment:
    """
    Substitute each token with a tag and keep the token -> tag mapping.

    Tags are drawn in ascending sorted order (by type name and repr when the
    tags cannot be compared), one per distinct token in order of first
    occurrence. The alphabet itself is never modified, so it can be
    reused for another call.

    :param src: Token sequence to substitute.
    :param tags: Alphabet of hashable tags.
    :returns: Tag sequence of the same length as ``src`` plus the mapping used.
    :raises NotEnoughTagsError: If ``src`` is longer than the alphabet.
    :raises EmptyInputError: If ``src`` is empty.
    """
    # compared against total length, not the distinct count
    if len(src) > len(tags):
        raise NotEnoughTagsError(required=len(src), available=len(tags))
    if len(src) == 0:
        raise EmptyInputError("cannot substitute an empty sequence")

    fresh = iter(_tag_order(tags))
    mapping: dict[Token, Tag] = {}
    out: list[Tag] = []

    for token in src:
        tag = mapping.get(token, _UNSET)
        if tag is _UNSET:
            tag = _next_tag(fresh, token)
            mapping[token] = tag
        out.append(tag)

    log.debug(
        f"assigned {len(mapping)} tags to {len(src)} tokens "
        f"({len(tags) - len(mapping)} left unused)"
    )
    return TagAssignment(tags=out, mapping=mapping)


def replace_with_tags(src: Sequence[Token], tags: Set[Tag]) -> list[Tag]:
    """
    Substitute each token with a tag from ``tags``.

    See ``assign_tags`` for ordering and errors.
    """
    return assign_tags(src, tags).tags


__all__ = [
    "TagAssignment",
    "make_replace_list",
    "assign_tags",
    "replace_with_tags",
]
