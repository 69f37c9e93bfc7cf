"""Small integer routines: base conversion, digits, factorials and primes."""

from math import prod


def decimal_to_binary(n: int) -> int:
    """Return the binary digits of ``n`` read as a decimal integer.

    Non-positive inputs give 0.
    """
    result = 0
    place = 1
    while n > 0:
        n, bit = divmod(n, 2)
        result += bit * place
        place *= 10
    return result


def binary_to_decimal(n: int) -> int:
    """Interpret the decimal digits of ``n`` as binary digits and return the value.

    Non-positive inputs give 0.
    """
    result = 0
    weight = 1
    while n > 0:
        n, digit = divmod(n, 10)
        result += digit * weight
        weight *= 2
    return result


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n`` (0 for non-positive ``n``)."""
    total = 0
    while n > 0:
        n, digit = divmod(n, 10)
        total += digit
    return total


def factorial(k: int) -> int:
    """Return ``k!``; values of ``k`` below 1 give 1."""
    return prod(range(1, k + 1))


def n_choose_r(n: int, r: int) -> int:
    """Return the binomial coefficient ``n`` choose ``r`` computed from factorials."""
    return factorial(n) // (factorial(r) * factorial(n - r))


def is_power_of_two(n: int) -> bool:
    """Return True when ``n`` is a positive power of two."""
    return n > 0 and n & (n - 1) == 0


def _is_prime(num: int) -> bool:
    divisor = 2
    while divisor * divisor <= num:
        if num % divisor == 0:
            return False
        divisor += 1
    return True


def primes_up_to(n: int) -> list[int]:
    """Return every prime from 2 up to and including ``n``."""
    return [num for num in range(2, n + 1) if _is_prime(num)]


def reverse_digits(x: int) -> int:
    """Return ``x`` with its decimal digits reversed (0 for non-positive ``x``)."""
    result = 0
    while x > 0:
        x, digit = divmod(x, 10)
        result = result * 10 + digit
    return result