from typing import List, Optional, Sequence, TextIO, Tuple

import torch
from torch import Tensor

from ..data.dimensions import check_dimensions
from ..errors import NumericOverflow
from .parenthesize import check_range, parenthesize, write_parenthesization

INT64_MAX = torch.iinfo(torch.int64).max


def _empty_table(n: int) -> List[List[Optional[int]]]:
    # 1-based, row and column 0 are padding
    return [[None] * (n + 1) for _ in range(n + 1)]


class ChainOptimizer:
    """
    Bottom-up interval DP for the matrix chain ordering problem.

    Holds the cost table m and the split table s of one dimension sequence,
    both indexed 1..n. m[i][j] is the least number of scalar multiplications
    for A_i..A_j and s[i][j] the k of the optimal (A_i..A_k)(A_k+1..A_j).
    """

    def __init__(self, dims: Sequence[int]):
        self.reset(dims)

    def reset(self, dims: Sequence[int]):
        # validate before touching the tables so a bad sequence leaves nothing behind
        dims = check_dimensions(dims)

        self._dims = dims
        self._n = len(dims) - 1
        self._m = _empty_table(self._n)
        self._s = _empty_table(self._n)
        for i in range(1, self._n + 1):
            self._m[i][i] = 0
        self._solved = False

    @property
    def dims(self) -> List[int]:
        return list(self._dims)

    @property
    def num_matrices(self) -> int:
        return self._n

    @property
    def solved(self) -> bool:
        return self._solved

    def compute_optimal_order(self) -> "ChainOptimizer":
        P, m, s, n = self._dims, self._m, self._s, self._n

        for L in range(2, n + 1):
            for i in range(1, n - L + 2):
                j = i + L - 1
                best, best_k = None, None
                for k in range(i, j):
                    q = m[i][k] + m[k + 1][j] + P[i - 1] * P[k] * P[j]
                    # strict comparison keeps the earliest k among equal costs
                    if best is None or q < best:
                        best, best_k = q, k
                m[i][j] = best
                s[i][j] = best_k

        self._solved = True
        return self

    def _ensure_solved(self):
        if not self._solved:
            self.compute_optimal_order()

    @property
    def min_cost(self) -> int:
        self._ensure_solved()
        return self._m[1][self._n]

    def cost(self, i: int, j: int) -> int:
        self._ensure_solved()
        check_range(self._s, i, j)
        return self._m[i][j]

    def split(self, i: int, j: int) -> Optional[int]:
        self._ensure_solved()
        check_range(self._s, i, j)
        return self._s[i][j]

    def cost_table(self) -> List[List[Optional[int]]]:
        self._ensure_solved()
        return [row[:] for row in self._m]

    def split_table(self) -> List[List[Optional[int]]]:
        self._ensure_solved()
        return [row[:] for row in self._s]

    def parenthesization(self, i: int = 1, j: Optional[int] = None, **kwargs) -> str:
        self._ensure_solved()
        if j is None:
            j = self._n
        return parenthesize(self._s, i, j, **kwargs)

    def write_parenthesization(
        self, out: TextIO, i: int = 1, j: Optional[int] = None, **kwargs
    ) -> None:
        self._ensure_solved()
        if j is None:
            j = self._n
        write_parenthesization(self._s, out, i, j, **kwargs)

    def _to_tensor(self, table, name) -> Tensor:
        n = self._n
        out = torch.full((n, n), -1, dtype=torch.int64)
        for i in range(1, n + 1):
            for j in range(i, n + 1):
                value = table[i][j]
                if value is None:
                    continue
                if value > INT64_MAX:
                    raise NumericOverflow(
                        f"{name}[{i}][{j}]={value} does not fit in int64"
                    )
                out[i - 1, j - 1] = value
        return out

    def cost_tensor(self) -> Tensor:
        """(n, n) int64 view of m, 0-based, unused cells set to -1."""
        self._ensure_solved()
        return self._to_tensor(self._m, "m")

    def split_tensor(self) -> Tensor:
        """(n, n) int64 view of s holding 1-based split points, unused cells set to -1."""
        self._ensure_solved()
        return self._to_tensor(self._s, "s")

    def __repr__(self):
        return f"ChainOptimizer(dims={self._dims}, solved={self._solved})"


def matrix_chain_order(
    dims: Sequence[int],
) -> Tuple[List[List[Optional[int]]], List[List[Optional[int]]]]:
    optimizer = ChainOptimizer(dims).compute_optimal_order()
    return optimizer.cost_table(), optimizer.split_table()
