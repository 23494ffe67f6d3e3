"""Additional validation utilities for configuration."""

import warnings
from typing import Any, Dict, List

KNOWN_SECTIONS = {
    "conversion": {"default_convention", "coercion_policy"},
    "logging": {"level", "format"},
}


def check_for_warnings(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check configuration for settings that are ignored or likely mistakes.

    Args:
        config_dict: Raw configuration dictionary

    Returns:
        List of warning messages
    """
    warning_messages = []

    for section, value in config_dict.items():
        if section not in KNOWN_SECTIONS:
            warning_messages.append(
                f"Unknown configuration section '{section}' will be ignored"
            )
            continue

        if isinstance(value, dict):
            for key in value:
                if key not in KNOWN_SECTIONS[section]:
                    warning_messages.append(
                        f"Unknown key '{section}.{key}' will be ignored"
                    )

    return warning_messages


def emit_warnings(warning_messages: List[str]) -> None:
    """
    Emit warning messages using Python's warnings module.

    Args:
        warning_messages: List of warning messages to emit
    """
    for message in warning_messages:
        warnings.warn(message, UserWarning, stacklevel=2)
