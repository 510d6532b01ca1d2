import math

import pytest

from practicekit.numbers import bin_string, factorial, fibonacci, hex_string, oct_string


@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 4096, -42])
def test_hex_round_trip(value):
    assert int(hex_string(value), 16) == value


@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 4096, -42])
def test_oct_round_trip(value):
    assert int(oct_string(value), 8) == value


@pytest.mark.parametrize("value", [0, 1, 7, 10, 255, 4096, -42])
def test_bin_round_trip(value):
    assert int(bin_string(value), 2) == value


def test_bin_uses_only_binary_digits():
    assert set(bin_string(12345)) <= {"0", "1"}


def test_hex_is_lower_case():
    assert hex_string(10) == "a"


def test_factorial_of_five():
    assert factorial(5) == 120


@pytest.mark.parametrize("value", range(2, 15))
def test_factorial_recurrence(value):
    assert factorial(value) == value * factorial(value - 1)


@pytest.mark.parametrize("value", range(0, 15))
def test_factorial_matches_math(value):
    assert factorial(value) == math.factorial(value)


def test_factorial_of_small_and_negative_values():
    assert factorial(0) == factorial(1)
    assert factorial(-3) == factorial(1)


def test_fibonacci_of_ten():
    assert fibonacci(10) == 55


@pytest.mark.parametrize("value", range(3, 25))
def test_fibonacci_recurrence(value):
    assert fibonacci(value) == fibonacci(value - 1) + fibonacci(value - 2)


def test_fibonacci_base_cases_agree():
    assert fibonacci(0) == fibonacci(1) == fibonacci(2) == fibonacci(-5)