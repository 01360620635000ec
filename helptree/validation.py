"""Configuration validation framework with schema definitions.

Provides declarative schema definitions (ConfigField, ConfigItems) for
validating the `[helptree]` section and the `[commands]` tree.
Supports type checking, custom validators and fuzzy matching for typo detection.

Used by:
- ConfigLoader, to report problems when loading
- 'helptree --validate' CLI for static configuration checking
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .config import BOOL_FALSE_STRINGS, BOOL_TRUE_STRINGS

__all__ = [
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "format_config_error",
    "validate_commands",
]


@dataclass
class ConfigField:
    """Describes an expected configuration field for validation.

    Attributes:
        name: The configuration key name
        field_type: Expected type (str, int, bool, list, dict) or tuple of types for union
        default: Default value if not provided
        description: Human-readable description
        validator: Custom validator function returning list of error messages
    """

    name: str
    field_type: type | tuple[type, ...] = str
    default: Any = None
    description: str = ""
    validator: Callable[[Any], list[str]] | None = None

    @property
    def type_name(self) -> str:
        """Return human-readable type name (e.g., 'str or list')."""
        if isinstance(self.field_type, tuple):
            return " or ".join(typ.__name__ for typ in self.field_type)
        return self.field_type.__name__


class ConfigItems(list):
    """A list of ConfigField items with lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)

    def get(self, name: str) -> ConfigField | None:
        """Get a ConfigField by name.

        Args:
            name: The field name to look up

        Returns:
            The ConfigField if found, None otherwise
        """
        for prop in self:
            if prop.name == name:
                return prop
        return None


def _find_similar_key(unknown_key: str, known_keys: list[str]) -> str | None:
    """Find a similar key using fuzzy matching."""
    matches = difflib.get_close_matches(unknown_key, known_keys, n=1)
    if matches:
        return matches[0]
    return None


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        section: Section (or command path) name
        field: Field name that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error

    Returns:
        Formatted error message
    """
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates a configuration table against a schema."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The configuration dictionary to validate
            section: Name used in error messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.section = section
        self.log = logger

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate configuration against schema.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []

        for field_def in schema:
            value = self.config.get(field_def.name)
            if value is None:
                continue

            type_error = self._check_type(field_def, value)
            if type_error:
                errors.append(type_error)
                continue

            if field_def.validator:
                errors.extend(format_config_error(self.section, field_def.name, validation_error) for validation_error in field_def.validator(value))

        return errors

    def _check_type(self, field_def: ConfigField, value: Any) -> str | None:  # noqa: ANN401
        """Check if value matches expected type.

        Returns:
            Error message if type mismatch, None otherwise
        """
        expected = field_def.field_type if isinstance(field_def.field_type, tuple) else (field_def.field_type,)
        for single_type in expected:
            if single_type is bool:
                if isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS):
                    return None
            elif single_type is int:
                if isinstance(value, int) and not isinstance(value, bool):
                    return None
            elif isinstance(value, single_type):
                return None
        return format_config_error(
            self.section,
            field_def.name,
            f"Expected {field_def.type_name}, got {type(value).__name__}",
            _EXAMPLES.get(expected[0], "").format(name=field_def.name),
        )

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown configuration keys.

        Args:
            schema: List of ConfigField definitions

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = [f.name for f in schema]

        for key in self.config:
            if key in known_keys:
                continue

            similar = _find_similar_key(key, known_keys)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"

            self.log.warning(msg)
            warnings.append(msg)

        return warnings


_EXAMPLES: dict[type, str] = {
    bool: "Use true/false (without quotes)",
    int: "Use {name} = 42 (without quotes)",
    str: 'Use {name} = "value"',
    list: 'Use {name} = ["item1", "item2"]',
}


def validate_commands(section: dict[str, Any], schema: ConfigItems, logger: logging.Logger, path: str = "commands") -> list[str]:
    """Validate every entry of a `[commands]` table, recursively.

    Args:
        section: The commands table
        schema: Schema of a single command entry
        logger: Logger instance for warnings
        path: Dotted location used in messages

    Returns:
        List of error messages (unknown keys are only logged)
    """
    errors: list[str] = []
    seen: dict[str, str] = {}
    for name, entry in section.items():
        if not isinstance(entry, dict):
            errors.append(format_config_error(path, name, f"Expected dict/section, got {type(entry).__name__}"))
            continue
        aliases = entry.get("aliases", [])
        if isinstance(aliases, str):
            aliases = [aliases]
        elif not isinstance(aliases, list):
            aliases = []
        for alias in [name, *aliases]:
            key = str(alias).casefold()
            if seen.get(key, name) != name:
                errors.append(format_config_error(path, name, f"Alias '{alias}' is already used by '{seen[key]}'"))
            seen[key] = name
        entry_path = f"{path}.{name}"
        validator = ConfigValidator(entry, entry_path, logger)
        errors.extend(validator.validate(schema))
        validator.warn_unknown_keys(schema)
        children = entry.get("commands")
        if isinstance(children, dict):
            errors.extend(validate_commands(children, schema, logger, f"{entry_path}.commands"))
    return errors
