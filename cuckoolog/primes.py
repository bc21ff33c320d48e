"""
Prime helpers used to size the cuckoo table.
"""


def is_prime(n: int) -> bool:
    """Test if a number is prime using 6k +/- 1 trial division."""
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0 or n % 3 == 0:
        return False

    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def next_prime(n: int) -> int:
    """
    Find the smallest odd prime at least as large as n.

    Even inputs are bumped to the next odd number first, so 2 maps to 3.

    Example:
        >>> next_prime(100)
        101
        >>> next_prime(11)
        11
    """
    if n % 2 == 0:
        n += 1

    while not is_prime(n):
        n += 2
    return n
