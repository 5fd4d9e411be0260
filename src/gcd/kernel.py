# This module computes the greatest common divisor of two unsigned 64-bit integers.
# The kernel does no input validation for users; zero operands are a caller bug.
# Callers in the web layer validate form values before they ever reach this function.

from __future__ import annotations

from src.gcd.models import U64_MAX


def gcd(n: int, m: int) -> int:
    """Return the greatest common divisor of two non-zero unsigned integers.

    Uses Euclid's algorithm by repeated remainder. Passing zero or a value
    outside the unsigned 64-bit range fails the precondition assertion.
    """

    assert n != 0 and m != 0, "gcd is only defined for non-zero operands"
    assert 0 < n <= U64_MAX and 0 < m <= U64_MAX, "gcd operands must fit in 64 unsigned bits"

    while m != 0:
        if m < n:
            n, m = m, n
        m = m % n
    return n
