"""Coercion of raw input values into normalized text.

The normalizer is the only stage that looks at the Python type of its input.
Every value is tagged once with an ``InputKind`` and then handled according to
the active ``CoercionPolicy``:

============  ==========================  ==================  ==================
kind          strict                      stringify           empty-on-missing
============  ==========================  ==================  ==================
string        as-is                       as-is               as-is
number        decimal text                decimal text        decimal text
absent        InvalidInputError           ``""``              ``""``
structured    InvalidTypeError            canonical text      ``""``
============  ==========================  ==================  ==================

The result is always trimmed of surrounding whitespace.
"""

import math
import numbers
import re
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, FrozenSet, Union

from .exceptions import InvalidInputError, InvalidTypeError
from .models import MISSING, CoercionPolicy, InputKind

# Default object reprs embed a memory address and differ between runs
_ADDRESS_REPR_RE = re.compile(r"\bat 0x[0-9a-fA-F]+>")

# Containers nested deeper than this render as empty text
MAX_NESTING_DEPTH = 100


def classify_input(value: Any) -> InputKind:
    """Tag a raw value with the kind the normalizer dispatches on."""
    if value is None or value is MISSING:
        return InputKind.ABSENT
    if isinstance(value, str):
        return InputKind.STRING
    # bool is an int subclass but carries no numeric meaning here
    if isinstance(value, bool):
        return InputKind.STRUCTURED
    if isinstance(value, (numbers.Real, Decimal)):
        return InputKind.NUMBER
    return InputKind.STRUCTURED


def normalize(
    value: Any, policy: Union[CoercionPolicy, str] = CoercionPolicy.STRINGIFY
) -> str:
    """Coerce a raw value into trimmed text.

    Args:
        value: Any value supplied by the caller
        policy: Coercion policy for absent and structured values

    Returns:
        Trimmed text, empty when the value carries no usable content

    Raises:
        InvalidInputError: value is None/MISSING and policy is strict
        InvalidTypeError: value is structured and policy is strict
        ValueError: policy is not a known CoercionPolicy
    """
    policy = CoercionPolicy(policy)
    kind = classify_input(value)

    if kind is InputKind.STRING:
        text = value
    elif kind is InputKind.NUMBER:
        text = format_number(value)
    elif kind is InputKind.ABSENT:
        if policy is CoercionPolicy.STRICT:
            raise InvalidInputError(
                "Input is missing; a string or number is required",
                value=value,
                policy=policy.value,
            )
        text = ""
    elif policy is CoercionPolicy.STRICT:
        raise InvalidTypeError(
            f"Input of type {type(value).__name__} cannot be normalized under the strict policy",
            value=value,
            policy=policy.value,
        )
    elif policy is CoercionPolicy.STRINGIFY:
        text = _canonical_text(value, frozenset())
    else:
        text = ""

    return text.strip()


def format_number(value: Any) -> str:
    """Render a number as plain decimal text without exponent notation.

    Integers of any size, floats, decimals and fractions all come out in the
    same positional form; non-finite values are spelled ``nan``, ``inf`` and
    ``-inf`` whatever their type.

    Examples:
        >>> format_number(1e20)
        '100000000000000000000'
        >>> format_number(-2.5)
        '-2.5'
        >>> format_number(Fraction(1, 4))
        '0.25'
    """
    if isinstance(value, int):
        # Decimal has no digit limit for int conversion
        return format(Decimal(value), "f")
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, numbers.Rational):
        number = Decimal(value.numerator) / Decimal(value.denominator)
    else:
        as_float = float(value)
        if not math.isfinite(as_float):
            return str(as_float)
        number = Decimal(repr(as_float))

    if number.is_nan():
        return "nan"
    if number.is_infinite():
        return "-inf" if number.is_signed() else "inf"
    return format(number, "f")


def _canonical_text(value: Any, seen: FrozenSet[int]) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return ""
    if isinstance(value, (list, tuple, set, frozenset)):
        # Self-references and nesting past the depth limit contribute nothing
        if id(value) in seen or len(seen) >= MAX_NESTING_DEPTH:
            return ""
        seen = seen | {id(value)}
        parts = [_element_text(item, seen) for item in value]
        if isinstance(value, (set, frozenset)):
            parts.sort()
        return " ".join(part for part in parts if part)

    try:
        text = str(value)
    except Exception:
        return ""
    if _ADDRESS_REPR_RE.search(text):
        return ""
    return text


def _element_text(item: Any, seen: FrozenSet[int]) -> str:
    kind = classify_input(item)
    if kind is InputKind.ABSENT:
        return ""
    if kind is InputKind.STRING:
        return item.strip()
    if kind is InputKind.NUMBER:
        return format_number(item)
    return _canonical_text(item, seen).strip()
