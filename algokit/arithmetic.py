"""Number puzzles: binary addition, column titles, digit games and bit tests."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import zip_longest

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def add_binary(a: str, b: str) -> str:
    """Sum of two binary strings, as a binary string."""
    if set(a) - {"0", "1"} or set(b) - {"0", "1"}:
        raise ValueError("binary strings may only hold the digits 0 and 1")
    digits = []
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = carry + int(x) + int(y)
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def column_title(number: int) -> str:
    """Spreadsheet column title for a 1-based column number ("A", "Z", "AA", ...)."""
    letters = []
    while number > 0:
        number, remainder = divmod(number - 1, 26)
        letters.append(chr(ord("A") + remainder))
    return "".join(reversed(letters))


def _digit_square_sum(n: int) -> int:
    if n <= 0:
        return 0
    return sum(int(digit) ** 2 for digit in str(n))


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of ``n`` reaches 1."""
    slow = _digit_square_sum(n)
    fast = _digit_square_sum(_digit_square_sum(n))
    while slow != fast:
        slow = _digit_square_sum(slow)
        fast = _digit_square_sum(_digit_square_sum(fast))
    return slow == 1


def maximum_product(nums: Sequence[int]) -> int:
    """Largest product of any three values in ``nums``."""
    if len(nums) < 3:
        raise ValueError("at least three values are needed")
    ordered = sorted(nums)
    return max(
        ordered[-1] * ordered[-2] * ordered[-3],
        ordered[0] * ordered[1] * ordered[-1],
    )


def min_moves(nums: Sequence[int]) -> int:
    """Moves needed to make all values equal, each move adding 1 to all but one."""
    if not nums:
        return 0
    return sum(nums) - min(nums) * len(nums)


def missing_number(nums: Sequence[int]) -> int:
    """The one value of 0..len(nums) that ``nums`` lacks."""
    n = len(nums)
    return n * (n + 1) // 2 - sum(nums)


def reverse_integer(x: int) -> int:
    """Digits of ``x`` reversed, keeping the sign; 0 if that leaves 32-bit range."""
    sign = -1 if x < 0 else 1
    result = sign * int(str(abs(x))[::-1])
    return result if INT_MIN <= result <= INT_MAX else 0


def is_palindrome_number(x: int) -> bool:
    """Whether the decimal digits of ``x`` read the same both ways."""
    return x >= 0 and reverse_integer(x) == x


def is_power_of_two(n: int) -> bool:
    """Whether ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0