from ..optim.matrix_chain import ChainOptimizer

UNUSED = "-"


def _format_table(table, n, unused):
    rows = []
    for i in range(1, n + 1):
        cells = [UNUSED if unused(i, j) else str(table[i][j]) for j in range(1, n + 1)]
        rows.append("\t".join(cells))
    return "\n".join(rows)


def format_tables(optimizer: ChainOptimizer) -> str:
    """Tab separated dump of the cost and split tables, unused cells marked '-'."""
    n = optimizer.num_matrices
    m = optimizer.cost_table()
    s = optimizer.split_table()
    return (
        "Table m (costs):\n"
        + _format_table(m, n, lambda i, j: i > j)
        + "\n\nTable s (splits):\n"
        + _format_table(s, n, lambda i, j: i >= j)
        + "\n"
    )
