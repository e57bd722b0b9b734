import random

import pytest

from max_average import (
    InvalidDimensions,
    MalformedInput,
    Solution,
    best_window,
    format_average,
    max_average,
    parse_sequence,
    parse_tokens,
    prefix_sums,
)


def brute_force(nums, k):
    n = len(nums)
    return max(
        sum(nums[i : i + length]) / length
        for length in range(k, n + 1)
        for i in range(n - length + 1)
    )


def test_prefix_sums():
    assert prefix_sums([3, -1, 4]) == [0, 3, 2, 6]
    assert prefix_sums([]) == [0]


def test_matches_brute_force_on_random_sequences():
    rng = random.Random(644)
    for _ in range(300):
        n = rng.randint(1, 25)
        k = rng.randint(1, n)
        nums = [rng.randint(-1000, 1000) for _ in range(n)]
        assert max_average(nums, k) == pytest.approx(brute_force(nums, k), abs=1e-9)


def test_five_values_k2():
    nums = [1, 12, -5, -6, 50]
    assert max_average(nums, 2) == pytest.approx(brute_force(nums, 2), abs=1e-9)


def test_k_equals_n_is_whole_average():
    assert format_average(max_average([2, 4, 6, 8], 4)) == "5.000000000000000"
    nums = [7, -3, 11, 0, 2]
    assert max_average(nums, 5) == pytest.approx(sum(nums) / 5)


def test_k_one_is_max_element():
    nums = [-4, 9, 3, -20, 9, 1]
    assert max_average(nums, 1) == 9


@pytest.mark.parametrize("k", [1, 2, 5, 7])
def test_constant_sequence(k):
    assert max_average([-3] * 7, k) == pytest.approx(-3)


def test_all_negative():
    assert max_average([-5, -1, -8], 2) == pytest.approx(-3.0)


def test_large_values_do_not_overflow():
    big = 2**40
    assert max_average([big, big, big], 2) == pytest.approx(float(big))


def test_window_sum_is_converted_to_float_before_dividing():
    # 2**53 + 1 rounds to 2**53 as a float; 2**53 / 3 then rounds to ...330.5,
    # while the exact quotient would be 3002399751580331
    assert max_average([2**53 + 1, 0, 0], 3) == 3002399751580330.5


def test_signed_tokens():
    assert parse_tokens("+2 1 -4 +7") == (2, 1, [-4, 7])


def test_best_window_ties_keep_first_found():
    # [4,4] at start 0 and the length-3 window [4,4,4] all average 4
    avg, start, length = best_window([4, 4, 4, 1], 2)
    assert avg == 4
    assert (start, length) == (0, 2)


def test_best_window_reports_longer_window_when_better():
    avg, start, length = best_window([1, 12, -5, -6, 50], 4)
    assert avg == pytest.approx(12.75)
    assert (start, length) == (1, 4)

    avg, start, length = best_window([1, 12, -5, -6, 50], 5)
    assert avg == pytest.approx(10.4)
    assert (start, length) == (0, 5)

    avg, start, length = best_window([1, -9, 6, 6], 1)
    assert (avg, start, length) == (6, 2, 1)


@pytest.mark.parametrize(
    "value",
    [0.0, 5.0, -5.0, 1 / 3, -2 / 3, 1e9 + 0.25, -123456789.5, 1e-7],
)
def test_format_has_fifteen_fraction_digits(value):
    out = format_average(value)
    whole, frac = out.split(".")
    assert len(frac) == 15
    assert float(out) == pytest.approx(value)


def test_format_examples():
    assert format_average(12.75) == "12.750000000000000"
    assert format_average(-2.5) == "-2.500000000000000"


@pytest.mark.parametrize("nums,k", [([], 1), ([1, 2], 0), ([1, 2], 3), ([1], -1)])
def test_invalid_dimensions(nums, k):
    with pytest.raises(InvalidDimensions):
        max_average(nums, k)


def test_parse_tokens():
    assert parse_tokens("4 4\n2 4 6 8\n") == (4, 4, [2, 4, 6, 8])
    # values may span lines; trailing tokens are ignored
    assert parse_tokens("3 1 5\n-2\n7 99") == (3, 1, [5, -2, 7])


@pytest.mark.parametrize(
    "text",
    [
        "",
        "5",
        "3 2 1 2",
        "3 x 1 2 3",
        "3 2 1 two 3",
        "2 1 1.5 2",
        "2 1 1_000 3",
        "2 1 1 \u0663",
        "2 1 0x10 3",
        "2 1 1 2e3",
    ],
)
def test_parse_tokens_malformed(text):
    with pytest.raises(MalformedInput):
        parse_tokens(text)


@pytest.mark.parametrize("text", ["0 1", "-2 1 5 5", "3 0 1 2 3", "2 3 1 2"])
def test_parse_tokens_invalid_dimensions(text):
    with pytest.raises(InvalidDimensions):
        parse_tokens(text)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_tokens("a b")


def test_parse_sequence():
    assert parse_sequence(" 1 -2\t3 ") == [1, -2, 3]
    assert parse_sequence("") == []
    with pytest.raises(MalformedInput):
        parse_sequence("1 2 x")
    with pytest.raises(MalformedInput):
        parse_sequence(None)


def test_solution_adapter():
    assert Solution().findMaxAverage([1, 12, -5, -6, 50, 3], 4) == pytest.approx(12.75)
