"""Problems about values or subarrays adding up to a target."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Indices ``(later, earlier)`` of two values summing to ``target``, or None."""
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return index, partner
        seen[value] = index
    return None


def three_sum(nums: Sequence[int]) -> list[tuple[int, int, int]]:
    """All distinct sorted triples from ``nums`` that sum to zero."""
    values = sorted(nums)
    result = []
    for i, first in enumerate(values):
        if i > 0 and first == values[i - 1]:
            continue
        j, k = i + 1, len(values) - 1
        while j < k:
            total = first + values[j] + values[k]
            if total == 0:
                result.append((first, values[j], values[k]))
                j += 1
                k -= 1
                while j < k and values[j] == values[j - 1]:
                    j += 1
            elif total > 0:
                k -= 1
            else:
                j += 1
    return result


def four_sum(nums: Sequence[int], target: int) -> list[tuple[int, int, int, int]]:
    """All distinct sorted quadruples from ``nums`` that sum to ``target``."""
    values = sorted(nums)
    n = len(values)
    result = []
    for i in range(n - 3):
        if i > 0 and values[i] == values[i - 1]:
            continue
        for j in range(i + 1, n - 2):
            if j != i + 1 and values[j] == values[j - 1]:
                continue
            k, l = j + 1, n - 1
            while k < l:
                total = values[i] + values[j] + values[k] + values[l]
                if total > target:
                    l -= 1
                elif total < target:
                    k += 1
                else:
                    result.append((values[i], values[j], values[k], values[l]))
                    k += 1
                    l -= 1
                    while k < l and values[k] == values[k - 1]:
                        k += 1
                    while k < l and values[l] == values[l + 1]:
                        l -= 1
    return result


def subarrays_divisible_by(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum is divisible by ``k``."""
    if k == 0:
        raise ValueError("k must not be zero")
    seen = Counter({0: 1})
    count = 0
    running = 0
    for value in nums:
        running = (running + value) % k
        count += seen[running]
        seen[running] += 1
    return count


def subarray_sum(nums: Sequence[int], k: int) -> int:
    """Number of contiguous subarrays whose sum equals ``k``."""
    seen = Counter({0: 1})
    count = 0
    running = 0
    for value in nums:
        running += value
        count += seen[running - k]
        seen[running] += 1
    return count


def has_pair_with_difference(arr: Sequence[int], x: int) -> bool:
    """Whether two elements of ``arr`` differ by exactly ``x``."""
    seen: set[int] = set()
    for value in arr:
        if value + x in seen or value - x in seen:
            return True
        seen.add(value)
    return False


def can_pair_at_least(k: int, arr1: Sequence[int], arr2: Sequence[int]) -> bool:
    """Whether the arrays can be paired up so that every pair sums to at least ``k``."""
    if len(arr2) < len(arr1):
        raise ValueError("arr2 must have at least as many values as arr1")
    pairs = zip(sorted(arr1), sorted(arr2, reverse=True))
    return all(a + b >= k for a, b in pairs)