import pytest

from chain_order import InvalidInput
from chain_order.numerics import (
    INT64_CATALAN_LIMIT,
    catalan_number,
    catalan_numbers,
    count_parenthesizations,
    fits_int64,
)

INT64_MAX = 2 ** 63 - 1


@pytest.mark.parametrize("n, expected", [(0, 1), (1, 1), (2, 2), (3, 5), (4, 14), (10, 16796)])
def test_known_values(n, expected):
    assert catalan_number(n) == expected


def test_table():
    assert catalan_numbers(6) == [1, 1, 2, 5, 14, 42, 132]
    assert catalan_numbers(0) == [1]


def test_int64_boundary():
    assert catalan_number(INT64_CATALAN_LIMIT) <= INT64_MAX
    assert catalan_number(INT64_CATALAN_LIMIT + 1) > INT64_MAX
    assert fits_int64(INT64_CATALAN_LIMIT)
    assert not fits_int64(INT64_CATALAN_LIMIT + 1)


def test_count_parenthesizations():
    # ((AB)C) and (A(BC))
    assert count_parenthesizations(3) == 2
    assert count_parenthesizations(4) == 5
    assert count_parenthesizations(1) == 1


@pytest.mark.parametrize("n", [-1, 2.0, True])
def test_invalid(n):
    with pytest.raises(InvalidInput):
        catalan_number(n)


def test_invalid_count():
    with pytest.raises(InvalidInput):
        count_parenthesizations(0)


@pytest.mark.parametrize("n", [-1, 1.5, False])
def test_fits_int64_invalid(n):
    with pytest.raises(InvalidInput):
        fits_int64(n)
