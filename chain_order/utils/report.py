from typing import List, NamedTuple

from ..numerics.catalan import catalan_number
from ..optim.greedy import greedy_order
from ..optim.matrix_chain import ChainOptimizer


class ChainSummary(NamedTuple):
    dims: List[int]
    min_cost: int
    parenthesization: str
    catalan: int
    greedy_cost: int


def summarize(optimizer: ChainOptimizer) -> ChainSummary:
    dims = optimizer.dims
    greedy_cost, _ = greedy_order(dims)
    return ChainSummary(
        dims=dims,
        min_cost=optimizer.min_cost,
        parenthesization=optimizer.parenthesization(),
        catalan=catalan_number(optimizer.num_matrices),
        greedy_cost=greedy_cost,
    )


def format_report(summary: ChainSummary) -> str:
    n = len(summary.dims) - 1
    lines = [
        "Matrix dimensions (P): " + " ".join(str(p) for p in summary.dims),
        "",
        f"Minimum multiplication cost: {summary.min_cost}",
        f"Optimal parenthesization: {summary.parenthesization}",
        f"Catalan number (n = {n}): {summary.catalan}",
    ]
    return "\n".join(lines) + "\n"


def save_report(summary: ChainSummary, path: str) -> None:
    with open(path, "w") as f:
        f.write(format_report(summary))
