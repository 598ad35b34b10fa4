from numbers import Integral
from typing import List

from ..errors import InvalidInput

# catalan_number(n) fits a signed 64-bit integer up to and including this n
INT64_CATALAN_LIMIT = 35


def _check_index(n):
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidInput(f"catalan index must be an integer, got {n!r}")
    if n < 0:
        raise InvalidInput(f"catalan index must be non-negative, got {n}")


def catalan_numbers(n: int) -> List[int]:
    """
    Bottom-up table of the Catalan numbers C_0..C_n,
    C_i = sum_{j<i} C_j * C_{i-j-1}.

    Values are exact python ints; they grow like 4^n / n^1.5 and leave the
    int64 range after INT64_CATALAN_LIMIT.
    """
    _check_index(n)

    cat = [0] * (max(n, 1) + 1)
    cat[0] = cat[1] = 1
    for i in range(2, n + 1):
        for j in range(i):
            cat[i] += cat[j] * cat[i - j - 1]
    return cat[: n + 1]


def catalan_number(n: int) -> int:
    return catalan_numbers(n)[n]


def fits_int64(n: int) -> bool:
    _check_index(n)
    return n <= INT64_CATALAN_LIMIT


def count_parenthesizations(num_matrices: int) -> int:
    """Number of distinct full bracketings of a chain of num_matrices factors."""
    if num_matrices < 1:
        raise InvalidInput(f"need at least one matrix, got {num_matrices}")
    return catalan_number(num_matrices - 1)
