"""
Core math modules для flat

Правила типов элементов и численные примитивы сравнения.
"""

# Element Types (conversion gate)
from src.flat.math.element_types import (
    NUMERIC_TOWER,
    ElementTypeError,
    common_type,
    convert,
    is_convertible,
    is_element_type,
    is_scalar,
    numeric_rank,
    require_convertible,
    zero_of,
)

# Numerical Safeguards
from src.flat.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close,
    is_valid_float,
    validate_tolerance,
)

__all__ = [
    # Element Types — Constants
    "NUMERIC_TOWER",
    # Element Types — Exceptions
    "ElementTypeError",
    # Element Types — Functions
    "common_type",
    "convert",
    "is_convertible",
    "is_element_type",
    "is_scalar",
    "numeric_rank",
    "require_convertible",
    "zero_of",
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Functions
    "is_close",
    "is_valid_float",
    "validate_tolerance",
]
