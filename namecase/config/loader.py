"""Configuration loader for namecase."""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from namecase.conversion.models import CoercionPolicy, NamingConvention

from .environment import EnvironmentConfig, load_environment_config
from .exceptions import ConfigurationError
from .models import AppConfig
from .validators import check_for_warnings, emit_warnings

DEFAULT_CONFIG_CANDIDATES = (
    Path("namecase.yaml"),
    Path("config") / "namecase.yaml",
)


def load_config(config_path: Optional[Path] = None) -> tuple[AppConfig, EnvironmentConfig]:
    """
    Load and validate configuration from a YAML file and environment variables.

    Config file lookup:
    1. Use config_path if given (it must exist)
    2. Try namecase.yaml in the current directory
    3. Try ./config/namecase.yaml
    4. Fall back to built-in defaults

    Args:
        config_path: Optional path to configuration file

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with validated configuration

    Raises:
        ConfigurationError: If the file or the environment is invalid
    """
    config_file = _find_config_file(config_path)

    config_dict = _read_yaml(config_file) if config_file else {}

    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration file {config_file} must contain a mapping at the top level",
            suggestions=["Use 'conversion:' and 'logging:' sections at the top level"],
        )

    warnings = check_for_warnings(config_dict)
    if warnings:
        emit_warnings(warnings)

    app_config = _validate(config_dict)

    try:
        env_config = load_environment_config()
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load environment configuration: {e}",
            suggestions=["Check the NAMECASE_* environment variables"],
        ) from e

    return app_config, env_config


def _read_yaml(config_file: Path) -> dict:
    try:
        with open(config_file, "r") as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {e}",
            suggestions=[
                "Check YAML syntax in your config file",
                "Ensure proper indentation (use spaces, not tabs)",
            ],
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read configuration file: {e}",
            suggestions=[
                f"Ensure {config_file} is readable",
                "Check file permissions",
            ],
        ) from e

    # An empty file means "all defaults"
    return config_dict if config_dict is not None else {}


def _validate(config_dict: dict) -> AppConfig:
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError.from_validation_error(
            e,
            suggestions=[
                "Review namecase.example.yaml for the expected format",
                "Conventions: " + ", ".join(c.value for c in NamingConvention),
                "Policies: " + ", ".join(p.value for p in CoercionPolicy),
            ],
        ) from e


def _find_config_file(config_path: Optional[Path] = None) -> Optional[Path]:
    """
    Resolve the configuration file to load.

    Args:
        config_path: Optional explicit path to config file

    Returns:
        Path to configuration file, or None when no default file exists

    Raises:
        ConfigurationError: If an explicit config_path does not exist
    """
    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(
                f"Specified configuration file not found: {config_path}",
                suggestions=[
                    f"Ensure {config_path} exists",
                    "Omit --config to use namecase.yaml or built-in defaults",
                ],
            )
        return config_path

    for candidate in DEFAULT_CONFIG_CANDIDATES:
        if candidate.exists():
            return candidate

    return None


def validate_config_file(config_path: Optional[Path] = None) -> bool:
    """
    Validate a configuration file without loading environment variables.

    Uses the same lookup as load_config() when no path is given.

    Args:
        config_path: Optional path to configuration file

    Returns:
        True if valid (or no file to check), False otherwise; the outcome is
        printed to stdout
    """
    try:
        config_file = _find_config_file(config_path)
        if config_file is None:
            print("No configuration file found; built-in defaults apply")
            return True
        config_dict = _read_yaml(config_file)
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration file {config_file} must contain a mapping at the top level"
            )
        emit_warnings(check_for_warnings(config_dict))
        _validate(config_dict)
        print(f"✓ Configuration file {config_file} is valid")
        return True
    except ConfigurationError as e:
        print(f"✗ Configuration validation failed:\n{e}")
        return False
