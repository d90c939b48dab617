"""Frequency counting over hashable tokens."""

from collections import Counter
from collections.abc import Mapping, Sequence
import logging

from .errors import EmptyInputError
from .types import FreqList, FreqMap, Token

log = logging.getLogger(__name__)


def make_freq_map(src: Sequence[Token]) -> FreqMap:
    """
    Count occurrences of each distinct token.

    Keys keep first-occurrence order and the counts sum to ``len(src)``.

    :raises EmptyInputError: If ``src`` is empty.
    """
    if len(src) == 0:
        raise EmptyInputError("cannot count an empty sequence")

    occurrences = dict(Counter(src))
    log.debug(f"counted {len(src)} tokens, {len(occurrences)} distinct")
    return occurrences


def make_freq_list(occurrences: Mapping[Token, int]) -> FreqList:
    """
    Return the counts of a frequency map sorted ascending.

    The result is an order-independent fingerprint of the frequency profile.

    :raises EmptyInputError: If ``occurrences`` is empty.
    """
    if len(occurrences) == 0:
        raise EmptyInputError("cannot build a distribution from an empty map")
    return sorted(occurrences.values())


def same_distribution(a: Sequence[Token], b: Sequence[Token]) -> bool:
    """Check whether two sequences share the same sorted count multiset."""
    return make_freq_list(make_freq_map(a)) == make_freq_list(make_freq_map(b))


__all__ = ["make_freq_map", "make_freq_list", "same_distribution"]
