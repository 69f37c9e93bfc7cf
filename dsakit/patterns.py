"""Text patterns made of characters, returned as lists of lines."""


def butterfly(n: int) -> list[str]:
    """Return the ``2 * n`` lines of a butterfly of stars with wings of height ``n``."""
    upper = [
        "*" * (i + 1) + " " * (2 * (n - i - 1)) + "*" * (i + 1) for i in range(n)
    ]
    lower = ["*" * (n - i) + " " * (2 * i) + "*" * (n - i) for i in range(n)]
    return upper + lower


def countdown_triangle(n: int) -> list[str]:
    """Return ``n`` lines where line ``i`` counts down from ``i + 1`` to 1."""
    return [
        "".join(str(j) for j in range(i + 1, 0, -1)) for i in range(n)
    ]