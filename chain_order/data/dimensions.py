from numbers import Integral
import re
from typing import List, Optional, Sequence

import torch

from ..errors import InvalidInput

# matrix count drawn in random mode when none is given
MIN_RANDOM_MATRICES = 5
MAX_RANDOM_MATRICES = 15


def check_dimensions(dims: Sequence[int]) -> List[int]:
    """
    Validate a dimension sequence P and return it as a list of python ints.

    P[i-1] x P[i] is the shape of matrix i, so n matrices need n + 1 entries.
    """
    if dims is None:
        raise InvalidInput("dimension sequence is missing")

    dims = list(dims)
    if len(dims) < 2:
        raise InvalidInput(
            f"need at least 2 dimensions to describe a matrix, got {len(dims)}"
        )

    for idx, d in enumerate(dims):
        # bool is an Integral but never a meaningful dimension
        if isinstance(d, bool) or not isinstance(d, Integral):
            raise InvalidInput(f"dimension P[{idx}]={d!r} is not an integer")
        if d <= 0:
            raise InvalidInput(f"dimension P[{idx}]={d} must be positive")

    return [int(d) for d in dims]


def parse_dimensions(text: str) -> List[int]:
    tokens = [tok for tok in re.split(r"[\s,]+", text.strip()) if tok]
    try:
        dims = [int(tok) for tok in tokens]
    except ValueError as e:
        raise InvalidInput(f"could not parse dimensions from {text!r}") from e
    return check_dimensions(dims)


def make_generator(seed: Optional[int] = None) -> torch.Generator:
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator


def random_dimensions(
    num_matrices: Optional[int] = None,
    min_dim: int = 1,
    max_dim: int = 1000,
    generator: torch.Generator = None,
) -> List[int]:
    """
    :param num_matrices: length of the chain, drawn from [5, 15] if None
    :param min_dim: smallest dimension (inclusive)
    :param max_dim: largest dimension (inclusive)
    :param generator: torch generator, pass a seeded one for reproducible chains
    :return: a dimension sequence of num_matrices + 1 entries
    """
    if generator is None:
        generator = make_generator()

    if min_dim < 1 or max_dim < min_dim:
        raise InvalidInput(f"invalid dimension range [{min_dim}, {max_dim}]")

    if num_matrices is None:
        num_matrices = torch.randint(
            MIN_RANDOM_MATRICES, MAX_RANDOM_MATRICES + 1, (1,), generator=generator
        ).item()
    elif num_matrices < 1:
        raise InvalidInput(f"need at least one matrix, got {num_matrices}")

    dims = torch.randint(
        min_dim, max_dim + 1, (num_matrices + 1,), generator=generator
    )
    return dims.tolist()
