"""Single-list problems: stock trading, partitioning, counting and searching."""

from __future__ import annotations

import heapq
from collections.abc import Sequence


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one buy followed by one later sell (0 if none)."""
    if not prices:
        raise ValueError("prices must not be empty")
    lowest = prices[0]
    best = 0
    for price in prices[1:]:
        lowest = min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_unlimited(prices: Sequence[int]) -> int:
    """Best profit when any number of non-overlapping trades is allowed."""
    free, held = 0, 0
    for price in reversed(prices):
        free, held = max(held - price, free), max(free + price, held)
    return free


def min_chocolate_difference(packets: Sequence[int], m: int) -> int:
    """Smallest max-min spread when handing ``m`` packets to ``m`` students."""
    if m < 1 or m > len(packets):
        raise ValueError("m must be between 1 and the number of packets")
    ordered = sorted(packets)
    return min(high - low for low, high in zip(ordered, ordered[m - 1:]))


def find_duplicate(nums: Sequence[int]) -> int:
    """The repeated value in a list of n+1 values drawn from 1..n."""
    slow = fast = nums[0]
    while True:
        slow = nums[slow]
        fast = nums[nums[fast]]
        if slow == fast:
            break
    fast = nums[0]
    while slow != fast:
        slow = nums[slow]
        fast = nums[fast]
    return slow


def move_zeroes(nums: list[int]) -> None:
    """Move all zeros to the end in place, keeping other values in order."""
    kept = [value for value in nums if value != 0]
    nums[:] = kept + [0] * (len(nums) - len(kept))


def remove_duplicates(nums: list[int]) -> int:
    """Compact a sorted list in place; return how many unique values lead it."""
    if not nums:
        return 0
    write = 0
    for value in nums[1:]:
        if value != nums[write]:
            write += 1
            nums[write] = value
    return write + 1


def sort_colors(nums: list[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def max_area(heights: Sequence[int]) -> int:
    """Largest water area held between two of the given vertical lines."""
    low, high = 0, len(heights) - 1
    best = 0
    while low <= high:
        shorter = min(heights[low], heights[high])
        best = max(best, (high - low) * shorter)
        if shorter == heights[low]:
            low += 1
        else:
            high -= 1
    return best


def find_duplicates(nums: Sequence[int]) -> list[int]:
    """Values seen a second time, in the order their repeat occurs."""
    pending: set[int] = set()
    repeats = []
    for value in nums:
        if value in pending:
            repeats.append(value)
            pending.discard(value)
        else:
            pending.add(value)
    return repeats


def can_jump(nums: Sequence[int]) -> bool:
    """Whether the last index is reachable when each value is a max jump."""
    reach = 0
    for index, step in enumerate(nums):
        if index > reach:
            return False
        reach = max(reach, index + step)
    return True


def majority_element(nums: Sequence[int]) -> int | None:
    """The value occurring more than half the time, or None if there is none."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 1
    for value in nums[1:]:
        count += 1 if value == candidate else -1
        if count == 0:
            candidate = value
            count = 1
    if nums.count(candidate) > len(nums) // 2:
        return candidate
    return None


def max_card_score(cards: Sequence[int], k: int) -> int:
    """Best total from taking ``k`` cards off either end of the row."""
    if k < 0 or k > len(cards):
        raise ValueError("k must be between 0 and the number of cards")
    left = sum(cards[:k])
    right = 0
    best = left
    for taken in range(1, k + 1):
        left -= cards[k - taken]
        right += cards[-taken]
        best = max(best, left + right)
    return best


def merge_sorted(nums1: list[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1`` in place."""
    if m < 0 or n < 0 or len(nums1) < m + n or len(nums2) < n:
        raise ValueError("nums1 must have room for m + n values and nums2 hold n")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def _sort_and_count(values: list[int]) -> tuple[list[int], int]:
    if len(values) <= 1:
        return values, 0
    mid = (len(values) + 1) // 2
    left, left_count = _sort_and_count(values[:mid])
    right, right_count = _sort_and_count(values[mid:])
    count = left_count + right_count
    passed = 0
    for value in left:
        while passed < len(right) and value > 2 * right[passed]:
            passed += 1
        count += passed
    return list(heapq.merge(left, right)), count


def reverse_pairs(nums: Sequence[int]) -> int:
    """Count pairs i < j with nums[i] > 2 * nums[j]."""
    return _sort_and_count(list(nums))[1]