"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

from namecase.conversion.models import CoercionPolicy, NamingConvention


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ConversionConfig(BaseModel):
    """Defaults applied by the converter when the caller does not override them."""

    default_convention: NamingConvention = Field(
        NamingConvention.KEBAB, description="Convention values are rendered into"
    )
    coercion_policy: CoercionPolicy = Field(
        CoercionPolicy.STRINGIFY,
        description="How absent and structured values are handled (strict, stringify, empty-on-missing)",
    )

    @field_validator("default_convention", "coercion_policy", mode="before")
    @classmethod
    def normalize_choice(cls, v):
        """Accept choices in any case and with underscores (SCREAMING_SNAKE -> screaming-snake)."""
        if isinstance(v, str):
            return v.strip().lower().replace("_", "-")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.WARNING, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object for namecase."""

    conversion: ConversionConfig = Field(
        default_factory=ConversionConfig, description="Conversion defaults"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )
