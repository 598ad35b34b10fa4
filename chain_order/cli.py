import argparse

from .data.dimensions import make_generator, parse_dimensions, random_dimensions
from .errors import ChainOrderError, InvalidInput
from .optim.matrix_chain import ChainOptimizer
from .utils.report import save_report, summarize
from .utils.tables import format_tables


def build_parser():
    parser = argparse.ArgumentParser(
        description="Optimal matrix chain multiplication order",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        default=None,
        choices=["manual", "random"],
        help="manual if --dims is given, random otherwise",
    )
    parser.add_argument("--dims", default=None, type=str, help="e.g. '10 20 30 40 30'")
    parser.add_argument("--num_matrices", default=None, type=int)
    parser.add_argument("--min_dim", default=1, type=int)
    parser.add_argument("--max_dim", default=1000, type=int)
    parser.add_argument("--seed", default=None, type=int)
    parser.add_argument("--show_tables", action="store_true")
    parser.add_argument("--output", default="matrix_chain_output.txt", type=str)
    parser.add_argument("--no_save", action="store_true")
    parser.add_argument("--plot", default=None, type=str, help="save table heatmaps here")
    parser.add_argument("--log", action="store_true", help="log the run to wandb")
    parser.add_argument("--project", default="matrix-chain", type=str)
    return parser


def prompt_dimensions(read=input, write=print):
    while True:
        try:
            text = read("Enter dimensions array P: ")
        except EOFError:
            raise InvalidInput("input closed before a dimension sequence was entered") from None
        try:
            return parse_dimensions(text)
        except InvalidInput as e:
            write(f"Invalid input: {e}")


def read_dimensions(args, read=input, write=print):
    # an explicit chain implies manual mode
    mode = args.mode
    if mode is None:
        mode = "manual" if args.dims is not None else "random"

    if mode == "manual":
        if args.dims is not None:
            return parse_dimensions(args.dims)
        return prompt_dimensions(read, write)

    if args.dims is not None:
        raise InvalidInput("--dims cannot be combined with --mode random")

    dims = random_dimensions(
        args.num_matrices,
        min_dim=args.min_dim,
        max_dim=args.max_dim,
        generator=make_generator(args.seed),
    )
    write(f"Randomly generated {len(dims) - 1} matrices.")
    write("Dimensions P: " + " ".join(str(d) for d in dims))
    return dims


def report(args, optimizer, write=print):
    summary = summarize(optimizer)
    write(f"Minimum number of multiplications: {summary.min_cost}")
    write(f"Optimal parenthesization: {summary.parenthesization}")
    write(f"Catalan number: {summary.catalan}")
    write(f"Greedy baseline cost: {summary.greedy_cost}")

    if args.show_tables:
        write(format_tables(optimizer))

    if not args.no_save:
        save_report(summary, args.output)
        write(f"Results saved to file: {args.output}")

    if args.plot is not None:
        from .utils.plotting import TablePlotter

        plotter = TablePlotter(optimizer)
        try:
            plotter.plot()
            plotter.save(args.plot)
        finally:
            plotter.close()
        write(f"Tables plotted to: {args.plot}")

    if args.log:
        from .utils.tracking import log_summary

        log_summary(summary, optimizer, project=args.project)


def main(argv=None, read=input, write=print) -> int:
    args = build_parser().parse_args(argv)

    try:
        dims = read_dimensions(args, read, write)
        optimizer = ChainOptimizer(dims).compute_optimal_order()
        report(args, optimizer, write)
    except ChainOrderError as e:
        write(f"error: {e}")
        return 2

    return 0
