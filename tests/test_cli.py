import pytest

from chain_order.cli import main

BIG = 2 ** 40


def run(argv, answers=()):
    lines = []
    answers = iter(answers)

    def read(prompt):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    code = main(argv, read=read, write=lines.append)
    return code, lines


def test_manual_dims(tmp_path, textbook_dims):
    out = tmp_path / "result.txt"
    code, lines = run(
        ["--mode", "manual", "--dims", "10 20 30 40 30", "--output", str(out), "--show_tables"]
    )
    assert code == 0
    assert "Minimum number of multiplications: 30000" in lines
    assert "Optimal parenthesization: (((A1 x A2) x A3) x A4)" in lines
    assert "Catalan number: 14" in lines
    assert any(line.startswith("Table m (costs):") for line in lines)
    assert out.read_text().startswith("Matrix dimensions (P): 10 20 30 40 30\n")


def test_manual_prompt_retries(tmp_path):
    code, lines = run(
        ["--mode", "manual", "--no_save"], answers=["5", "abc", "5 10 3"]
    )
    assert code == 0
    assert sum(line.startswith("Invalid input") for line in lines) == 2
    assert "Minimum number of multiplications: 150" in lines


def test_invalid_manual_dims():
    code, lines = run(["--mode", "manual", "--dims", "5", "--no_save"])
    assert code == 2
    assert lines[0].startswith("error:")


def test_random_seeded(tmp_path):
    argv = ["--mode", "random", "--seed", "3", "--num_matrices", "6", "--no_save"]
    code_a, lines_a = run(argv)
    code_b, lines_b = run(argv)
    assert code_a == code_b == 0
    assert lines_a == lines_b
    assert lines_a[0] == "Randomly generated 6 matrices."


def test_invalid_random_range():
    code, _ = run(["--min_dim", "10", "--max_dim", "2", "--no_save"])
    assert code == 2


def test_plot_option(tmp_path):
    path = tmp_path / "tables.png"
    code, _ = run(["--dims", "5 10 3 12", "--mode", "manual", "--no_save", "--plot", str(path)])
    assert code == 0
    assert path.exists()


def test_bad_mode():
    with pytest.raises(SystemExit):
        run(["--mode", "interactive"])


def test_dims_imply_manual_mode():
    code, lines = run(["--dims", "10 20 30 40 30", "--no_save", "--seed", "1"])
    assert code == 0
    assert not any(line.startswith("Randomly generated") for line in lines)
    assert "Minimum number of multiplications: 30000" in lines


def test_dims_with_random_mode_rejected():
    code, lines = run(["--mode", "random", "--dims", "10 20 30", "--no_save"])
    assert code == 2
    assert lines[-1].startswith("error:")


def test_closed_stdin():
    code, lines = run(["--mode", "manual", "--no_save"], answers=["5"])
    assert code == 2
    assert lines[0].startswith("Invalid input")
    assert lines[-1].startswith("error:")


def test_huge_dimensions_are_exact():
    dims = " ".join([str(BIG)] * 3)
    code, lines = run(["--dims", dims, "--no_save"])
    assert code == 0
    assert f"Minimum number of multiplications: {BIG ** 3}" in lines
    assert f"Greedy baseline cost: {BIG ** 3}" in lines


def test_huge_dimensions_cannot_be_plotted(tmp_path):
    dims = " ".join([str(BIG)] * 3)
    code, lines = run(["--dims", dims, "--no_save", "--plot", str(tmp_path / "t.png")])
    assert code == 2
    assert lines[-1].startswith("error:")
