"""Rendering of word sequences into naming conventions."""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Union

from .models import NamingConvention


def capitalize(word: str) -> str:
    """Upper-case the first character and lower-case the rest.

    Acronyms are not preserved: ``capitalize("HTTP") == "Http"``.
    """
    return word[:1].upper() + word[1:].lower()


@dataclass(frozen=True)
class ConventionStyle:
    """Joiner plus per-word casing for one naming convention."""

    separator: str
    first: Callable[[str], str]
    rest: Callable[[str], str]

    def join(self, words: Iterable[str]) -> str:
        parts = []
        for index, word in enumerate(words):
            parts.append(self.first(word) if index == 0 else self.rest(word))
        return self.separator.join(parts)


STYLES: Dict[NamingConvention, ConventionStyle] = {
    NamingConvention.KEBAB: ConventionStyle("-", str.lower, str.lower),
    NamingConvention.SNAKE: ConventionStyle("_", str.lower, str.lower),
    NamingConvention.SCREAMING_SNAKE: ConventionStyle("_", str.upper, str.upper),
    NamingConvention.CAMEL: ConventionStyle("", str.lower, capitalize),
    NamingConvention.PASCAL: ConventionStyle("", capitalize, capitalize),
    NamingConvention.SPACE: ConventionStyle(" ", str.lower, str.lower),
}


def render(words: Iterable[str], convention: Union[NamingConvention, str]) -> str:
    """Join words into a single identifier in the given convention.

    Args:
        words: Word sequence, usually produced by tokenize()
        convention: Target NamingConvention or its string value

    Returns:
        Rendered identifier ("" for an empty sequence)

    Raises:
        ValueError: convention is not a known NamingConvention

    Examples:
        >>> render(("screen", "name"), NamingConvention.CAMEL)
        'screenName'
        >>> render(("http", "server"), "screaming-snake")
        'HTTP_SERVER'
    """
    return STYLES[NamingConvention(convention)].join(words)
