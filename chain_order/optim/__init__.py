from .matrix_chain import ChainOptimizer, matrix_chain_order
from .parenthesize import (
    iter_tokens,
    parenthesize,
    parenthesization_cost,
    write_parenthesization,
)
from .greedy import greedy_order
