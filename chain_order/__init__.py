from .errors import ChainOrderError, InvalidInput, InvalidRange, NumericOverflow
from .optim.matrix_chain import ChainOptimizer, matrix_chain_order
from .optim.parenthesize import parenthesize, parenthesization_cost
from .numerics.catalan import catalan_number

__version__ = "0.1.0"
