"""Word-boundary tokenizer.

Splits identifier-like text into lowercase words with a single left-to-right
scan. The scanner tracks which kind of run it is in and closes the current
word whenever a boundary rule fires:

- any character outside ASCII letters and digits ends the current word and
  is dropped (``user_ID-number`` -> ``user|ID|number``)
- an uppercase letter after a lowercase letter or digit starts a new word
  (``fooBar`` -> ``foo|Bar``)
- a lowercase letter after two or more uppercase letters splits off the last
  uppercase letter (``HTTPServer`` -> ``HTTP|Server``)
- switching between letters and digits starts a new word
  (``foo123bar`` -> ``foo|123|bar``)
"""

import string
from enum import Enum
from typing import List

from .models import WordSequence

LOWER = frozenset(string.ascii_lowercase)
UPPER = frozenset(string.ascii_uppercase)
DIGITS = frozenset(string.digits)


class ScanState(Enum):
    DELIMITER = "delimiter"
    LOWER_RUN = "lower"
    UPPER_RUN = "upper"
    DIGIT_RUN = "digit"


def classify_char(char: str) -> ScanState:
    """Return the run kind a single character belongs to."""
    if char in LOWER:
        return ScanState.LOWER_RUN
    if char in UPPER:
        return ScanState.UPPER_RUN
    if char in DIGITS:
        return ScanState.DIGIT_RUN
    return ScanState.DELIMITER


def tokenize(text: str) -> WordSequence:
    """Split text into an ordered sequence of lowercase words.

    Never fails: text without ASCII letters or digits yields an empty tuple.

    Examples:
        >>> tokenize("HTTPServer")
        ('http', 'server')
        >>> tokenize("user_ID-number")
        ('user', 'id', 'number')
        >>> tokenize("foo123bar")
        ('foo', '123', 'bar')
    """
    words: List[str] = []
    current: List[str] = []
    state = ScanState.DELIMITER

    def flush() -> None:
        if current:
            words.append("".join(current).lower())
            current.clear()

    for char in text:
        kind = classify_char(char)

        if kind is ScanState.DELIMITER:
            flush()
        elif kind is ScanState.DIGIT_RUN:
            if state is not ScanState.DIGIT_RUN:
                flush()
            current.append(char)
        elif kind is ScanState.UPPER_RUN:
            if state in (ScanState.LOWER_RUN, ScanState.DIGIT_RUN):
                flush()
            current.append(char)
        elif state is ScanState.UPPER_RUN and len(current) > 1:
            # The last capital of an acronym run belongs to the new word
            head = current.pop()
            flush()
            current.append(head)
            current.append(char)
        else:
            if state is ScanState.DIGIT_RUN:
                flush()
            current.append(char)

        state = kind

    flush()
    return tuple(words)
