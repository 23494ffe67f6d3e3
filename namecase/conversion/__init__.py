"""Naming-convention conversion pipeline.

This package provides:
- normalize: coerce raw values into trimmed text under a CoercionPolicy
- tokenize: split text into lowercase words at delimiter, case and digit boundaries
- render: join words into a NamingConvention
- CaseConverter and helpers composing the three stages
"""

from .exceptions import InvalidInputError, InvalidTypeError, NormalizationError
from .models import (
    MISSING,
    CoercionPolicy,
    ConversionResult,
    InputKind,
    NamingConvention,
    WordSequence,
)
from .normalizer import classify_input, format_number, normalize
from .renderer import capitalize, render
from .service import (
    CaseConverter,
    convert_keys,
    normalize_to_convention,
    to_camel,
    to_kebab,
    to_pascal,
    to_screaming_snake,
    to_snake,
    to_space,
    to_words,
)
from .tokenizer import tokenize

__all__ = [
    # Pipeline stages
    "normalize",
    "tokenize",
    "render",
    # Composed operations
    "normalize_to_convention",
    "to_words",
    "convert_keys",
    "CaseConverter",
    "to_kebab",
    "to_snake",
    "to_screaming_snake",
    "to_camel",
    "to_pascal",
    "to_space",
    # Helpers
    "classify_input",
    "format_number",
    "capitalize",
    # Models
    "NamingConvention",
    "CoercionPolicy",
    "InputKind",
    "ConversionResult",
    "WordSequence",
    "MISSING",
    # Exceptions
    "NormalizationError",
    "InvalidInputError",
    "InvalidTypeError",
]
