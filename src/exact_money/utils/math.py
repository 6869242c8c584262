from __future__ import annotations


def ceil_to_multiple(n: int, m: int) -> int:
    """
    Ceil $n to the next multiple of $m. If $n is already a multiple, returns $n.

    Works for negative $n as well: the result always moves toward positive infinity,
    never away from zero.

    Args:
        n: The integer to round up.
        m: The positive multiple base.

    Returns:
        The smallest integer that is a multiple of $m and >= $n.

    Raises:
        ValueError: If $m <= 0.

    Examples:
        >>> ceil_to_multiple(0, 5)
        0
        >>> ceil_to_multiple(1, 5)
        5
        >>> ceil_to_multiple(5, 5)
        5
        >>> ceil_to_multiple(14, 5)
        15
        >>> ceil_to_multiple(-14, 5)
        -10
    """
    if m <= 0:
        raise ValueError(f"$m must be a positive integer, but provided value is: {m}")
    return ((n + m - 1) // m) * m
