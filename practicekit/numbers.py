"""Number formatting and small recursive sequences."""


def hex_string(value: int) -> str:
    """Return ``value`` in lower-case hexadecimal, with a leading '-' if negative."""
    return format(value, "x")


def oct_string(value: int) -> str:
    """Return ``value`` in octal, with a leading '-' if negative."""
    return format(value, "o")


def bin_string(value: int) -> str:
    """Return ``value`` in binary, with a leading '-' if negative."""
    return format(value, "b")


def factorial(value: int) -> int:
    """Return ``value!``; any value of 1 or less gives 1."""
    result = 1
    for factor in range(2, value + 1):
        result *= factor
    return result


def fibonacci(value: int) -> int:
    """Return the ``value``-th Fibonacci number; any value of 2 or less gives 1."""
    if value <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(value - 2):
        previous, current = current, previous + current
    return current