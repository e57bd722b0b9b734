import re
from typing import List

"""
Maximum average over windows of length >= k.

Both call paths (stdin stream and DB batch) go through best_window(),
which runs the exhaustive O(n^2) search over a prefix sum table.
"""

# ---------------- Errors ----------------


class MaxAverageError(ValueError):
    """Base class for input problems reported at the program boundary."""


class InvalidDimensions(MaxAverageError):
    """n < 1, k < 1 or k > n."""


class MalformedInput(MaxAverageError):
    """Missing or non-integer tokens."""


# ---------------- Parsing ----------------


INT_TOKEN = re.compile(r"[+-]?[0-9]+")


def to_int(tok, what):
    """Strict decimal integer token: optional sign, ASCII digits only."""
    if not isinstance(tok, str) or not INT_TOKEN.fullmatch(tok):
        raise MalformedInput(f"{what}: expected an integer, got {tok!r}")
    return int(tok)


def check_dimensions(n, k):
    if n < 1:
        raise InvalidDimensions(f"sequence length must be >= 1, got n={n}")
    if k < 1:
        raise InvalidDimensions(f"window length must be >= 1, got k={k}")
    if k > n:
        raise InvalidDimensions(f"window length k={k} exceeds sequence length n={n}")


def parse_tokens(text: str):
    """
    Parse "n k a1 .. an" (any whitespace between tokens).

    Dimensions are validated before the sequence is read. Tokens after
    the n-th value are ignored.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise MalformedInput(
            f"expected n and k, got {len(tokens)} token(s)"
        )
    n = to_int(tokens[0], "n")
    k = to_int(tokens[1], "k")
    check_dimensions(n, k)

    values = tokens[2 : 2 + n]
    if len(values) < n:
        raise MalformedInput(f"expected {n} sequence values, got {len(values)}")
    nums = [to_int(v, f"a[{i}]") for i, v in enumerate(values)]
    return n, k, nums


def parse_sequence(text) -> List[int]:
    """Whitespace separated integers, n implied by the count."""
    if text is None:
        raise MalformedInput("sequence is empty")
    return [to_int(v, f"a[{i}]") for i, v in enumerate(str(text).split())]


# ---------------- Core ----------------


def prefix_sums(nums: List[int]) -> List[int]:
    """prefix[i] is the sum of the first i values; prefix[0] == 0."""
    prefix = [0] * (len(nums) + 1)
    for i, x in enumerate(nums):
        prefix[i + 1] = prefix[i] + x
    return prefix


def best_window(nums: List[int], k: int):
    """
    Return (average, start, length) of the best window with length >= k.

    Lengths are scanned from k up to n and starts from left to right; a
    window replaces the current best only when strictly greater, so ties
    keep the first one found.
    """
    n = len(nums)
    check_dimensions(n, k)
    prefix = prefix_sums(nums)

    best_avg = float("-inf")
    best_start, best_len = 0, k
    for length in range(k, n + 1):
        for i in range(n - length + 1):
            avg = float(prefix[i + length] - prefix[i]) / length
            if avg > best_avg:
                best_avg = avg
                best_start, best_len = i, length
    return best_avg, best_start, best_len


def max_average(nums: List[int], k: int) -> float:
    return best_window(nums, k)[0]


def format_average(value: float) -> str:
    """Fixed point, exactly 15 digits after the decimal point."""
    return f"{value:.15f}"


class Solution:
    def findMaxAverage(self, nums: List[int], k: int) -> float:
        return max_average(nums, k)
