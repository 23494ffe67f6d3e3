"""Command-line entry point for namecase."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from namecase.config.environment import EnvironmentConfig
from namecase.config.exceptions import ConfigurationError
from namecase.config.loader import load_config, validate_config_file
from namecase.config.models import AppConfig
from namecase.conversion import CaseConverter, CoercionPolicy, NamingConvention
from namecase.conversion.exceptions import NormalizationError
from namecase.logging import get_logger
from namecase.logging.config import configure_logging
from namecase.logging.context import log_context

logger = get_logger(__name__, component="cli")


def load_runtime_config(
    config_path: Optional[Path],
    log_level_override: Optional[str] = None,
    convention_override: Optional[str] = None,
    policy_override: Optional[str] = None,
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply overrides.

    Priority for each setting: CLI flag > environment variable > config file.

    Args:
        config_path: Path to configuration file (None for default lookup)
        log_level_override: Log level from the CLI
        convention_override: Convention from the CLI
        policy_override: Coercion policy from the CLI

    Returns:
        Tuple of (AppConfig, EnvironmentConfig) with overrides applied

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    conversion = app_config.conversion
    if convention_override:
        conversion.default_convention = NamingConvention(convention_override)
    elif env_config.convention:
        conversion.default_convention = env_config.convention

    if policy_override:
        conversion.coercion_policy = CoercionPolicy(policy_override)
    elif env_config.policy:
        conversion.coercion_policy = env_config.policy

    if log_level_override:
        env_config.log_level = log_level_override
    elif not env_config.log_level:
        env_config.log_level = app_config.logging.level

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="namecase",
        description="Convert identifiers between naming conventions (kebab-case, camelCase, ...)",
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="VALUE",
        help="Values to convert (read one per line from stdin when omitted)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: namecase.yaml if present)",
    )
    parser.add_argument(
        "--to",
        dest="convention",
        default=None,
        choices=[c.value for c in NamingConvention],
        help="Target naming convention (overrides config and environment)",
    )
    parser.add_argument(
        "--policy",
        default=None,
        choices=[p.value for p in CoercionPolicy],
        help="Coercion policy (overrides config and environment)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    parser.add_argument(
        "--check-config",
        action="store_true",
        help="Validate the configuration file and exit",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--words",
        action="store_true",
        help="Print the word sequence instead of the rendered value",
    )
    output.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON array of {input, words, output} objects",
    )
    return parser


def _read_values(values: List[str], stream) -> List[Optional[str]]:
    """Collect raw values; blank entries stand for a missing value (None)."""
    raw = values if values else [line.rstrip("\r\n") for line in stream]
    return [value if value.strip() else None for value in raw]


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the namecase CLI.

    Returns:
        Exit code (0 for success, 1 for configuration errors or rejected values)
    """
    args = build_parser().parse_args(argv)

    if args.check_config:
        return 0 if validate_config_file(args.config) else 1

    try:
        app_config, env_config = load_runtime_config(
            args.config, args.log_level, args.convention, args.policy
        )
        configure_logging(
            level=env_config.log_level,
            format_type=app_config.logging.format,
            environment=env_config.environment,
        )
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return 1

    logger.info(
        "Configuration loaded",
        extra={
            "event": "config.loaded",
            "config_path": str(args.config) if args.config else None,
            "log_level": env_config.log_level,
            "convention": app_config.conversion.default_convention.value,
            "policy": app_config.conversion.coercion_policy.value,
        },
    )

    converter = CaseConverter.from_config(app_config.conversion)
    values = _read_values(args.values, sys.stdin)

    logger.info(
        "Converting values",
        extra={
            "event": "cli.run.started",
            "convention": converter.convention.value,
            "policy": converter.policy.value,
            "value_count": len(values),
        },
    )

    results = []
    rejected = 0
    with log_context(convention=converter.convention.value):
        for value in values:
            try:
                result = converter.convert(value)
            except NormalizationError as e:
                rejected += 1
                print(f"Rejected {value!r}: {e}", file=sys.stderr)
                logger.warning(
                    f"Rejected value: {e}",
                    extra={"event": "cli.value.rejected", "error_type": type(e).__name__},
                )
                continue

            if args.json:
                results.append(result.to_dict())
            elif args.words:
                print(" ".join(result.words))
            else:
                print(result.output)

    if args.json:
        print(json.dumps(results, ensure_ascii=False))

    logger.info(
        "Conversion finished",
        extra={
            "event": "cli.run.completed",
            "converted": len(values) - rejected,
            "rejected": rejected,
        },
    )

    return 1 if rejected else 0


if __name__ == "__main__":
    sys.exit(main())
