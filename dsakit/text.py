"""String routines: anagrams, ASCII case conversion, palindromes and reversal."""

from collections import Counter


def is_anagram(first: str, second: str) -> bool:
    """Return True when ``second`` uses exactly the letters of ``first``."""
    return len(first) == len(second) and Counter(first) == Counter(second)


def to_upper(word: str) -> str:
    """Convert ASCII lowercase letters to uppercase, leaving other characters alone."""
    return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in word)


def to_lower(word: str) -> str:
    """Convert ASCII uppercase letters to lowercase, leaving other characters alone."""
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in word)


def is_palindrome(word: str) -> bool:
    """Return True when ``word`` reads the same forwards and backwards."""
    return word == word[::-1]


def reverse_text(word: str) -> str:
    """Return ``word`` reversed."""
    return word[::-1]