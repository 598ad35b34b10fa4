from typing import Iterator, Optional, Sequence, TextIO

from ..errors import InvalidRange

SplitTable = Sequence[Sequence[Optional[int]]]


def check_range(split: SplitTable, i: int, j: int):
    n = len(split) - 1
    if i > j:
        raise InvalidRange(f"inverted interval [{i}, {j}]")
    if i < 1 or j > n:
        raise InvalidRange(f"interval [{i}, {j}] outside of chain [1, {n}]")


def _tokens(split, i, j, label, sep):
    if i == j:
        yield f"{label}{i}"
        return

    k = split[i][j]
    yield "("
    yield from _tokens(split, i, k, label, sep)
    yield sep
    yield from _tokens(split, k + 1, j, label, sep)
    yield ")"


def iter_tokens(
    split: SplitTable, i: int, j: int, label: str = "A", sep: str = " x "
) -> Iterator[str]:
    """
    Walk the split table and yield the tokens of the optimal bracketing of
    A_i..A_j, e.g. "(", "A1", " x ", "A2", ")".
    """
    check_range(split, i, j)
    return _tokens(split, i, j, label, sep)


def write_parenthesization(
    split: SplitTable, out: TextIO, i: int, j: int, **kwargs
) -> None:
    for token in iter_tokens(split, i, j, **kwargs):
        out.write(token)


def parenthesize(split: SplitTable, i: int, j: int, **kwargs) -> str:
    return "".join(iter_tokens(split, i, j, **kwargs))


def parenthesization_cost(
    dims: Sequence[int], split: SplitTable, i: int, j: int
) -> int:
    """
    Evaluate the bracketing encoded in split for A_i..A_j without the cost
    table: every product of a (p x q) and a (q x r) block adds p*q*r.
    """
    check_range(split, i, j)

    def cost(a, b):
        if a == b:
            return 0
        k = split[a][b]
        return cost(a, k) + cost(k + 1, b) + dims[a - 1] * dims[k] * dims[b]

    return cost(i, j)
