"""Environment variable loading and validation."""

import os
from typing import Optional

from namecase.conversion.models import CoercionPolicy, NamingConvention

from .exceptions import ConfigurationError

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvironmentConfig:
    """Environment variable configuration holder.

    Every field is optional; unset fields leave the config file value (or
    its default) in place.
    """

    def __init__(
        self,
        log_level: Optional[str] = None,
        convention: Optional[NamingConvention] = None,
        policy: Optional[CoercionPolicy] = None,
        environment: Optional[str] = None,
    ):
        self.log_level = log_level
        self.convention = convention
        self.policy = policy
        self.environment = environment or "local"


def load_environment_config() -> EnvironmentConfig:
    """
    Load and validate environment variables.

    Optional environment variables:
    - NAMECASE_LOG_LEVEL: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    - NAMECASE_CONVENTION: Override the default naming convention
    - NAMECASE_POLICY: Override the coercion policy
    - ENVIRONMENT: Environment label attached to log records (default: local)

    Returns:
        EnvironmentConfig object with validated values

    Raises:
        ConfigurationError: If any variable holds an invalid value
    """
    errors = []

    log_level = os.getenv("NAMECASE_LOG_LEVEL")
    convention_str = os.getenv("NAMECASE_CONVENTION")
    policy_str = os.getenv("NAMECASE_POLICY")
    environment = os.getenv("ENVIRONMENT")

    if log_level:
        log_level = log_level.strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid NAMECASE_LOG_LEVEL: '{log_level}'. "
                f"Must be one of: {', '.join(VALID_LOG_LEVELS)}"
            )

    convention = None
    if convention_str:
        try:
            convention = NamingConvention(_normalize_choice(convention_str))
        except ValueError:
            errors.append(
                f"Invalid NAMECASE_CONVENTION: '{convention_str}'. "
                f"Must be one of: {', '.join(c.value for c in NamingConvention)}"
            )

    policy = None
    if policy_str:
        try:
            policy = CoercionPolicy(_normalize_choice(policy_str))
        except ValueError:
            errors.append(
                f"Invalid NAMECASE_POLICY: '{policy_str}'. "
                f"Must be one of: {', '.join(p.value for p in CoercionPolicy)}"
            )

    if errors:
        raise ConfigurationError(
            "Environment variable validation failed",
            errors=errors,
            suggestions=[
                "Check the NAMECASE_* variables in your shell or .env file",
                "Unset a variable to fall back to the config file value",
            ],
        )

    return EnvironmentConfig(
        log_level=log_level or None,
        convention=convention,
        policy=policy,
        environment=environment,
    )


def _normalize_choice(value: str) -> str:
    return value.strip().lower().replace("_", "-")
