from typing import List, Sequence, Tuple

from ..data.dimensions import check_dimensions


def _greedy(shapes: List[Tuple[int, int]], exprs: List[str], cost: int):
    if len(shapes) == 1:
        return cost, exprs[0]

    # find the multiplication that requires the least calculations
    pair_costs = [i[0] * i[1] * j[1] for i, j in zip(shapes, shapes[1:])]
    # multiply the pair with the least calcs, the first one on ties
    idx = min(range(len(pair_costs)), key=pair_costs.__getitem__)

    merged_shape = (shapes[idx][0], shapes[idx + 1][1])
    merged_expr = f"({exprs[idx]} x {exprs[idx + 1]})"

    new_shapes = shapes[:idx] + [merged_shape] + shapes[idx + 2 :]
    new_exprs = exprs[:idx] + [merged_expr] + exprs[idx + 2 :]

    return _greedy(new_shapes, new_exprs, cost + pair_costs[idx])


def greedy_order(dims: Sequence[int]) -> Tuple[int, str]:
    """
    Baseline ordering: keep multiplying the adjacent pair that is cheapest
    right now. Returns the total cost and the bracketing it produced, which
    is never cheaper than the dynamic programming optimum. Costs are exact
    python ints.
    """
    dims = check_dimensions(dims)
    shapes = list(zip(dims, dims[1:]))
    exprs = [f"A{i}" for i in range(1, len(shapes) + 1)]
    return _greedy(shapes, exprs, 0)
