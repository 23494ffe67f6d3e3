"""Data models for the conversion pipeline.

This module defines the naming conventions and coercion policies that drive
the pipeline, the tag used to classify raw input values, and the record
returned by the conversion service.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Tuple

WordSequence = Tuple[str, ...]


class NamingConvention(str, Enum):
    """Target naming conventions a word sequence can be rendered into."""

    KEBAB = "kebab"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    SCREAMING_SNAKE = "screaming-snake"
    SPACE = "space"


class CoercionPolicy(str, Enum):
    """How the normalizer treats values that are not plain strings or numbers."""

    STRICT = "strict"
    STRINGIFY = "stringify"
    EMPTY_ON_MISSING = "empty-on-missing"


class InputKind(str, Enum):
    """Tag assigned to a raw input value before coercion."""

    STRING = "string"
    NUMBER = "number"
    ABSENT = "absent"
    STRUCTURED = "structured"


class _Missing:
    """Sentinel type for a value that was not supplied at all."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of running one value through the pipeline.

    Attributes:
        source: The raw value that was converted
        text: Normalized text produced from the source
        words: Lowercase word sequence produced by the tokenizer
        convention: Convention the words were rendered into
        output: Rendered string
    """

    source: Any
    text: str
    words: WordSequence
    convention: NamingConvention
    output: str

    @property
    def is_empty(self) -> bool:
        """Whether the source produced no words."""
        return not self.words

    def to_dict(self) -> dict:
        """JSON-friendly view used by the CLI."""
        return {
            "input": self.source if isinstance(self.source, (str, int, float, type(None))) else repr(self.source),
            "words": list(self.words),
            "output": self.output,
        }
