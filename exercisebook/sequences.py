"""Palindromic sequences and prime numbers."""

from __future__ import annotations

from collections.abc import Sequence


def is_palindrome(items: Sequence) -> bool:
    """Whether the sequence reads the same forwards and backwards."""
    values = list(items)
    return values == values[::-1]


def primes_below(limit: int = 100) -> list[int]:
    """Primes smaller than ``limit`` by the sieve of Eratosthenes."""
    if limit < 2:
        return []
    is_prime = [True] * limit
    is_prime[0] = is_prime[1] = False
    for number in range(2, limit):
        if is_prime[number]:
            for multiple in range(number * 2, limit, number):
                is_prime[multiple] = False
    return [number for number, prime in enumerate(is_prime) if prime]