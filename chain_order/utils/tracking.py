import wandb

from ..optim.matrix_chain import ChainOptimizer
from .report import ChainSummary


def _table(tensor, columns_prefix="j="):
    n = tensor.shape[0]
    columns = ["i"] + [f"{columns_prefix}{j + 1}" for j in range(n)]
    data = [[i + 1] + [v if v >= 0 else None for v in row] for i, row in enumerate(tensor.tolist())]
    return wandb.Table(columns=columns, data=data)


def log_summary(
    summary: ChainSummary,
    optimizer: ChainOptimizer = None,
    project: str = "matrix-chain",
    name: str = None,
    mode: str = "online",
):
    """
    Log a run's results to Weights & Biases. With an optimizer the cost and
    split tables are attached as wandb Tables.
    """
    run = wandb.init(
        project=project,
        name=name,
        mode=mode,
        config={"dims": summary.dims, "num_matrices": len(summary.dims) - 1},
    )
    run.log(
        {
            "min_cost": summary.min_cost,
            "greedy_cost": summary.greedy_cost,
            "catalan": summary.catalan,
        }
    )
    run.summary["parenthesization"] = summary.parenthesization

    if optimizer is not None:
        run.log(
            {
                "cost_table": _table(optimizer.cost_tensor()),
                "split_table": _table(optimizer.split_tensor()),
            }
        )
    run.finish()
    return run
