"""Custom exceptions for configuration management."""

from typing import Iterable, List, Optional

from pydantic import ValidationError

# pydantic error types raised when a section is not a mapping
_SECTION_TYPE_ERRORS = ("model_type", "model_attributes_type", "dict_type")


class ConfigurationError(Exception):
    """Configuration file or environment could not be turned into settings.

    The rendered message lists each problem on its own numbered line followed
    by suggestions, so the CLI can print it as-is.
    """

    def __init__(
        self,
        message: str,
        errors: Optional[List[str]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        self.message = message
        self.errors = list(errors or [])
        self.suggestions = list(suggestions or [])

        lines = [message]
        if self.errors:
            lines.append("\nValidation Errors:")
            lines.extend(f"  {i}. {error}" for i, error in enumerate(self.errors, 1))
        if self.suggestions:
            lines.append("\nSuggestions:")
            lines.extend(f"  - {suggestion}" for suggestion in self.suggestions)
        super().__init__("\n".join(lines))

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, suggestions: Iterable[str] = ()
    ) -> "ConfigurationError":
        """Build an error with one readable line per pydantic failure."""
        errors = []
        for detail in error.errors():
            field_path = " -> ".join(str(loc) for loc in detail["loc"])
            if detail["type"] == "enum":
                errors.append(f"Invalid value for '{field_path}': {detail['msg']}")
            elif detail["type"] in _SECTION_TYPE_ERRORS:
                errors.append(f"Section '{field_path}' must be a mapping")
            else:
                errors.append(f"{field_path}: {detail['msg']}")
        return cls("Configuration validation failed", errors=errors, suggestions=list(suggestions))
