"""namecase: convert identifier-like text between naming conventions."""

from .conversion import (
    MISSING,
    CaseConverter,
    CoercionPolicy,
    ConversionResult,
    InputKind,
    InvalidInputError,
    InvalidTypeError,
    NamingConvention,
    NormalizationError,
    convert_keys,
    normalize,
    normalize_to_convention,
    render,
    to_camel,
    to_kebab,
    to_pascal,
    to_screaming_snake,
    to_snake,
    to_space,
    to_words,
    tokenize,
)

__version__ = "0.1.0"

__all__ = [
    "normalize_to_convention",
    "normalize",
    "tokenize",
    "render",
    "to_words",
    "convert_keys",
    "CaseConverter",
    "to_kebab",
    "to_snake",
    "to_screaming_snake",
    "to_camel",
    "to_pascal",
    "to_space",
    "NamingConvention",
    "CoercionPolicy",
    "InputKind",
    "ConversionResult",
    "MISSING",
    "NormalizationError",
    "InvalidInputError",
    "InvalidTypeError",
]
