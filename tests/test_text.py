import math

import pytest

from algokit.text import (
    generate_parentheses,
    is_valid_parentheses,
    longest_common_prefix,
    reverse_words,
    str_str,
    valid_palindrome,
)


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("leetcode", "leeto"), ("hello", "ll"), ("aaaab", "aab"), ("a", "a")],
)
def test_str_str_finds_first_occurrence(haystack, needle):
    index = str_str(haystack, needle)
    if needle in haystack:
        assert haystack[index:index + len(needle)] == needle
        assert needle not in haystack[: index + len(needle) - 1]
    else:
        assert index == -1


def test_longest_common_prefix_example():
    assert longest_common_prefix(["flower", "flow", "flight"]) == "fl"


@pytest.mark.parametrize(
    "strs",
    [["dog", "racecar", "car"], ["abc"], ["prefix", "prefixes", "pre"], ["", "a"], ["same", "same"]],
)
def test_longest_common_prefix_is_maximal(strs):
    prefix = longest_common_prefix(strs)
    assert all(s.startswith(prefix) for s in strs)
    longer = {s[: len(prefix) + 1] for s in strs}
    assert any(len(s) == len(prefix) for s in strs) or len(longer) > 1


def test_longest_common_prefix_does_not_reorder_input():
    strs = ["b", "a"]
    longest_common_prefix(strs)
    assert strs == ["b", "a"]


def test_longest_common_prefix_needs_strings():
    with pytest.raises(ValueError):
        longest_common_prefix([])


@pytest.mark.parametrize("base", ["", "a", "aba", "racecar", "abba"])
@pytest.mark.parametrize("extra", ["x", "z"])
def test_one_insertion_into_palindrome_is_valid(base, extra):
    assert valid_palindrome(base)
    for position in range(len(base) + 1):
        assert valid_palindrome(base[:position] + extra + base[position:])


@pytest.mark.parametrize("s", ["()", "()[]{}", "{[()]}", ""])
def test_balanced_brackets_are_valid(s):
    assert is_valid_parentheses(s)


@pytest.mark.parametrize("s", ["(]", "(", ")", "([)]", "a", "(a)"])
def test_unbalanced_brackets_are_invalid(s):
    assert not is_valid_parentheses(s)


@pytest.mark.parametrize("n", range(7))
def test_generate_parentheses_counts_and_validity(n):
    result = generate_parentheses(n)
    assert len(result) == math.comb(2 * n, n) // (n + 1)
    assert len(set(result)) == len(result)
    assert result == sorted(result)
    assert all(len(s) == 2 * n and is_valid_parentheses(s) for s in result)


def test_generate_parentheses_zero():
    assert generate_parentheses(0) == [""]


def test_reverse_words_example():
    assert reverse_words("the sky is blue") == "blue is sky the"


@pytest.mark.parametrize("s", ["  hello world  ", "a good   example", "single", " x y z "])
def test_reverse_words_matches_split(s):
    result = reverse_words(s)
    assert result.split(" ") == s.split()[::-1]
    assert reverse_words(result) == " ".join(s.split())


def test_reverse_words_splits_on_spaces_only():
    assert reverse_words("a\tb c") == "c a\tb"


@pytest.mark.parametrize("s", ["", "   "])
def test_reverse_words_needs_a_word(s):
    with pytest.raises(ValueError):
        reverse_words(s)