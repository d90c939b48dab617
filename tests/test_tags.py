"""Unit tests for tag alphabets and frequency-preserving substitution."""

import random

import pytest

import bytetag as bt
from bytetag.errors import EmptyInputError, NotEnoughTagsError, TagInvariantError
from bytetag.tags import _next_tag


# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def alphabet():
    """Return the six-letter alphabet a..f."""
    return bt.make_replace_list("a", "f")


def _random_tokens(seed: int, length: int, distinct: int) -> list[str]:
    rng = random.Random(seed)
    return [str(rng.randrange(distinct)) for _ in range(length)]


# make_replace_list
# ---------------------------------------------------------------------------


def test_alphabet_inclusive_char_range(alphabet):
    """Character range includes both ends."""
    assert alphabet == frozenset("abcdef")
    assert len(alphabet) == ord("f") - ord("a") + 1


def test_alphabet_cyrillic_range():
    """Non-ASCII character ranges work by code point."""
    tags = bt.make_replace_list("а", "я")
    assert len(tags) == 32
    assert "а" in tags and "я" in tags


def test_alphabet_int_range():
    """Integer ranges step by one."""
    assert bt.make_replace_list(3, 7) == frozenset({3, 4, 5, 6, 7})


def test_alphabet_single_value():
    """Equal bounds give a one-tag alphabet."""
    assert bt.make_replace_list("x", "x") == frozenset({"x"})


def test_alphabet_inverted_range_is_empty():
    """start > end yields an empty alphabet rather than an error."""
    assert bt.make_replace_list("z", "a") == frozenset()
    assert bt.make_replace_list(10, 1) == frozenset()


def test_alphabet_rejects_multichar_bounds():
    """String bounds must be single characters."""
    with pytest.raises(ValueError):
        bt.make_replace_list("ab", "z")


def test_alphabet_rejects_mixed_bounds():
    """Bounds of different types are rejected."""
    with pytest.raises(TypeError):
        bt.make_replace_list("a", 5)


# replace_with_tags: concrete scenarios
# ---------------------------------------------------------------------------


def test_first_occurrence_gets_first_tag(alphabet):
    """Tags are drawn in sorted order, one per distinct token on first sight."""
    src = ["1", "2", "1", "3", "2", "1"]
    out = bt.replace_with_tags(src, alphabet)

    assert out == ["a", "b", "a", "c", "b", "a"]
    assert bt.make_freq_list(bt.make_freq_map(out)) == [1, 2, 3]
    assert bt.make_freq_list(bt.make_freq_map(src)) == [1, 2, 3]


def test_assign_tags_returns_mapping(alphabet):
    """The assignment exposes the token -> tag mapping in first-occurrence order."""
    result = bt.assign_tags(["x", "y", "x"], alphabet)
    assert result.mapping == {"x": "a", "y": "b"}
    assert list(result.mapping) == ["x", "y"]
    assert result.n_distinct == 2
    assert result.tags == ["a", "b", "a"]


def test_not_enough_tags():
    """Sequence longer than the alphabet fails."""
    tags = bt.make_replace_list("a", "c")
    with pytest.raises(NotEnoughTagsError) as exc_info:
        bt.replace_with_tags(["1", "2", "3", "4", "5"], tags)
    assert exc_info.value.required == 5
    assert exc_info.value.available == 3


def test_capacity_counts_total_length_not_distinct():
    """Repeated tokens still count against the alphabet size."""
    tags = bt.make_replace_list("a", "b")
    with pytest.raises(NotEnoughTagsError):
        bt.replace_with_tags(["1", "1", "1"], tags)


def test_capacity_equality_boundary():
    """Sequence exactly as long as the alphabet succeeds."""
    tags = bt.make_replace_list("a", "c")
    assert bt.replace_with_tags(["p", "q", "r"], tags) == ["a", "b", "c"]


def test_empty_source_raises(alphabet):
    """Empty sequence fails with EmptyInputError."""
    with pytest.raises(EmptyInputError):
        bt.replace_with_tags([], alphabet)


def test_capacity_checked_before_emptiness():
    """With an empty alphabet and empty source the empty-input check still applies."""
    with pytest.raises(EmptyInputError):
        bt.replace_with_tags([], frozenset())
    with pytest.raises(NotEnoughTagsError):
        bt.replace_with_tags(["a"], frozenset())


def test_inputs_are_not_mutated(alphabet):
    """Neither the source nor the alphabet change."""
    src = ["1", "2", "1"]
    tags = set(alphabet)
    bt.replace_with_tags(src, tags)
    assert src == ["1", "2", "1"]
    assert tags == set("abcdef")


def test_alphabet_reusable_across_calls(alphabet):
    """Each call enumerates the alphabet afresh."""
    first = bt.replace_with_tags(["q", "r"], alphabet)
    second = bt.replace_with_tags(["q", "r"], alphabet)
    assert first == second == ["a", "b"]


def test_int_tags():
    """Any orderable tag type can be used."""
    out = bt.replace_with_tags(["x", "y", "x"], bt.make_replace_list(100, 105))
    assert out == [100, 101, 100]


def test_unorderable_tags():
    """Alphabets mixing incomparable types still substitute deterministically."""
    tags = frozenset({1, "a", b"b", (2, "c")})
    src = ["x", "y", "x", "z"]

    first = bt.replace_with_tags(src, tags)
    second = bt.replace_with_tags(src, frozenset({(2, "c"), b"b", "a", 1}))

    assert first == second
    assert first[0] == first[2]
    assert len({first[0], first[1], first[3]}) == 3
    assert set(first) <= tags
    assert bt.same_distribution(src, first)


def test_next_tag_exhausted_raises_invariant_error():
    """Running out of tags is an internal error outside ByteTagError."""
    with pytest.raises(TagInvariantError):
        _next_tag(iter([]), "tok")
    assert not issubclass(TagInvariantError, bt.ByteTagError)


# Properties over seeded random sequences
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
def test_frequency_preserved(seed):
    """Sorted count multiset of the output equals that of the input."""
    src = _random_tokens(seed, length=1 + seed * 7, distinct=1 + seed % 9)
    tags = bt.make_replace_list(0, len(src) - 1 + seed % 3)
    out = bt.replace_with_tags(src, tags)

    assert len(out) == len(src)
    assert bt.make_freq_list(bt.make_freq_map(out)) == bt.make_freq_list(
        bt.make_freq_map(src)
    )
    assert bt.same_distribution(src, out)


@pytest.mark.parametrize("seed", range(20))
def test_substitution_is_injective(seed):
    """Distinct tokens never share a tag and equal tokens always do."""
    src = _random_tokens(seed, length=50, distinct=2 + seed)
    out = bt.replace_with_tags(src, bt.make_replace_list("一", "俿"))

    seen: dict[str, str] = {}
    for token, tag in zip(src, out):
        assert seen.setdefault(token, tag) == tag
    assert len(set(seen.values())) == len(seen)
    assert set(out).isdisjoint(src)


@pytest.mark.parametrize("seed", range(10))
def test_deterministic_with_rebuilt_alphabet(seed):
    """Same source and a freshly rebuilt alphabet give the same output."""
    src = _random_tokens(seed, length=40, distinct=6)
    first = bt.replace_with_tags(src, bt.make_replace_list("A", "z"))
    second = bt.replace_with_tags(src, bt.make_replace_list("A", "z"))
    assert first == second
