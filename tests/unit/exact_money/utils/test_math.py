import pytest

from exact_money.utils.math import ceil_to_multiple


@pytest.mark.parametrize(
    "n, m, expected",
    [
        [0, 5, 0],
        [1, 5, 5],
        [5, 5, 5],
        [14, 5, 15],
        [-14, 5, -10],
        [-15, 5, -15],
        [-1, 1000, 0],
    ],
)
def test_ceil_to_multiple(n: int, m: int, expected: int):
    assert ceil_to_multiple(n, m) == expected


def test_ceil_to_multiple_requires_positive_base():
    with pytest.raises(ValueError):
        ceil_to_multiple(10, 0)
