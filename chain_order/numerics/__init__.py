from .catalan import (
    INT64_CATALAN_LIMIT,
    catalan_number,
    catalan_numbers,
    count_parenthesizations,
    fits_int64,
)
