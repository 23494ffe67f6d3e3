"""Conversion service composing normalizer, tokenizer and renderer.

This module provides:
1. normalize_to_convention(): one-shot conversion of a raw value
2. to_words() and the to_<convention>() shortcuts
3. convert_keys(): recursive conversion of mapping keys in payloads
4. CaseConverter: a configured converter with logging and batch support
"""

import logging
from collections.abc import Mapping
from typing import Any, Collection, Iterable, Iterator, Optional, Union

from namecase.logging import get_logger

from .exceptions import NormalizationError
from .models import CoercionPolicy, ConversionResult, NamingConvention, WordSequence
from .normalizer import normalize
from .renderer import render
from .tokenizer import tokenize

logger = get_logger(__name__, component="conversion")

ConventionLike = Union[NamingConvention, str]
PolicyLike = Union[CoercionPolicy, str]


def to_words(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> WordSequence:
    """Normalize a raw value and split it into lowercase words."""
    return tokenize(normalize(value, policy))


def normalize_to_convention(
    value: Any,
    convention: ConventionLike,
    policy: PolicyLike = CoercionPolicy.STRINGIFY,
) -> str:
    """Convert a raw value into the target naming convention.

    Args:
        value: String, number, None/MISSING or any other value
        convention: Target NamingConvention or its string value
        policy: Coercion policy for absent and structured values

    Returns:
        Rendered identifier, "" when the value has no usable words

    Raises:
        InvalidInputError: value is absent and policy is strict
        InvalidTypeError: value is structured and policy is strict

    Example:
        >>> normalize_to_convention("user_ID-number", "kebab")
        'user-id-number'
    """
    return render(to_words(value, policy), convention)


def to_kebab(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.KEBAB, policy)


def to_snake(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.SNAKE, policy)


def to_screaming_snake(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.SCREAMING_SNAKE, policy)


def to_camel(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.CAMEL, policy)


def to_pascal(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.PASCAL, policy)


def to_space(value: Any, policy: PolicyLike = CoercionPolicy.STRINGIFY) -> str:
    return normalize_to_convention(value, NamingConvention.SPACE, policy)


def convert_keys(
    data: Any,
    convention: ConventionLike,
    policy: PolicyLike = CoercionPolicy.STRINGIFY,
    ignore_fields: Collection[str] = (),
) -> Any:
    """Rewrite the string keys of nested mappings into a naming convention.

    Mappings are rebuilt as plain dicts in their original key order. Lists and
    tuples are walked so mappings inside them are converted too; every other
    value is returned untouched. Keys that are not strings, keys listed in
    ignore_fields (original or converted spelling), and keys that render to
    an empty string are kept as they are, and the values under ignored keys
    are not descended into.

    When two keys render to the same name the later one wins and a
    ``conversion.keys.collision`` warning is logged.

    Example:
        >>> convert_keys({"user_id": 1, "meta": [{"createdAt": 2}]}, "camel")
        {'userId': 1, 'meta': [{'createdAt': 2}]}
    """
    convention = NamingConvention(convention)
    policy = CoercionPolicy(policy)

    if isinstance(data, Mapping):
        converted = {}
        for key, value in data.items():
            if not isinstance(key, str):
                converted[key] = convert_keys(value, convention, policy, ignore_fields)
                continue

            new_key = normalize_to_convention(key, convention, policy) or key
            if key in ignore_fields or new_key in ignore_fields:
                new_key, new_value = key, value
            else:
                new_value = convert_keys(value, convention, policy, ignore_fields)

            if new_key in converted:
                logger.warning(
                    f"Key {key!r} collides with an existing key after conversion to {new_key!r}",
                    extra={
                        "event": "conversion.keys.collision",
                        "key": key,
                        "converted_key": new_key,
                        "convention": convention.value,
                    },
                )
            converted[new_key] = new_value
        return converted

    if isinstance(data, (list, tuple)):
        items = [convert_keys(item, convention, policy, ignore_fields) for item in data]
        return items if isinstance(data, list) else tuple(items)

    return data


class CaseConverter:
    """Converts values into a configured naming convention.

    Holds a default convention and coercion policy so callers that convert
    many values (field names of a payload, column headers, CLI arguments)
    don't repeat them, and logs each conversion at DEBUG level.
    """

    def __init__(
        self,
        convention: ConventionLike = NamingConvention.KEBAB,
        policy: PolicyLike = CoercionPolicy.STRINGIFY,
        logger_instance: Optional[Union[logging.Logger, logging.LoggerAdapter]] = None,
    ):
        """Initialize CaseConverter.

        Args:
            convention: Default target convention
            policy: Coercion policy applied to every value
            logger_instance: Logger instance (defaults to module logger)

        Raises:
            ValueError: convention or policy is not a known value
        """
        self.convention = NamingConvention(convention)
        self.policy = CoercionPolicy(policy)
        self.logger = logger_instance or logger

    @classmethod
    def from_config(cls, config, **kwargs) -> "CaseConverter":
        """Build a converter from a ConversionConfig."""
        return cls(
            convention=config.default_convention,
            policy=config.coercion_policy,
            **kwargs,
        )

    def convert(
        self, value: Any, convention: Optional[ConventionLike] = None
    ) -> ConversionResult:
        """Run one value through the pipeline.

        Args:
            value: Raw value to convert
            convention: Override for the default convention

        Returns:
            ConversionResult with the normalized text, words and output

        Raises:
            InvalidInputError, InvalidTypeError: under the strict policy
        """
        target = NamingConvention(convention) if convention is not None else self.convention

        text = normalize(value, self.policy)
        words = tokenize(text)
        output = render(words, target)

        self.logger.debug(
            "Converted value",
            extra={
                "event": "conversion.value.converted",
                "convention": target.value,
                "policy": self.policy.value,
                "word_count": len(words),
                "output": output,
            },
        )

        return ConversionResult(
            source=value,
            text=text,
            words=words,
            convention=target,
            output=output,
        )

    def convert_many(
        self, values: Iterable[Any], convention: Optional[ConventionLike] = None
    ) -> Iterator[ConversionResult]:
        """Convert a batch of values, skipping the ones the policy rejects.

        Yields:
            ConversionResult for every value that was converted

        Note:
            Rejected values are logged at WARNING level with their position
            in the batch; processing continues with the next value.
        """
        for index, value in enumerate(values):
            try:
                yield self.convert(value, convention)
            except NormalizationError as e:
                self.logger.warning(
                    f"Rejected value at position {index}: {e}",
                    extra={
                        "event": "conversion.value.rejected",
                        "position": index,
                        "error_type": type(e).__name__,
                        "policy": self.policy.value,
                    },
                )

    def convert_keys(
        self,
        data: Any,
        convention: Optional[ConventionLike] = None,
        ignore_fields: Collection[str] = (),
    ) -> Any:
        """Convert mapping keys using this converter's defaults."""
        return convert_keys(
            data,
            convention if convention is not None else self.convention,
            self.policy,
            ignore_fields,
        )
