from .dimensions import check_dimensions, make_generator, parse_dimensions, random_dimensions
