class ChainOrderError(Exception):
    pass


class InvalidInput(ChainOrderError, ValueError):
    """Malformed dimension sequence or parameter, detected before any table work."""


class InvalidRange(ChainOrderError, IndexError):
    """Inverted or out of bounds interval passed to the reconstructor."""


class NumericOverflow(ChainOrderError, OverflowError):
    """A value does not fit the fixed width integer type it is exported to."""
