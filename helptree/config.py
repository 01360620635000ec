"""Configuration wrapper providing typed access and schema defaults."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

if TYPE_CHECKING:
    import logging

    from .validation import ConfigItems

__all__ = ["Configuration", "coerce_to_bool", "BOOL_FALSE_STRINGS", "BOOL_TRUE_STRINGS"]

# Type alias for config values
ConfigValueType = float | bool | str | list | dict

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: ConfigValueType | None, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    Args:
        value: The value to coerce
        default: Default value if value is None

    Returns:
        The boolean value
    """
    if value is None:
        return default
    if isinstance(value, str):
        if not value.strip():
            return False
        return value.lower().strip() not in BOOL_FALSE_STRINGS
    return bool(value)


class Configuration(dict):
    """The `[helptree]` section, with typed accessors.

    Optionally accepts a schema to provide default values automatically.
    """

    def __init__(
        self,
        *args: Any,  # noqa: ANN401
        logger: logging.Logger,
        schema: ConfigItems | None = None,
        **kwargs: Any,  # noqa: ANN401
    ):
        """Initialize the configuration object.

        Args:
            *args: Arguments for dict
            logger: Logger instance to use for warnings
            schema: Optional list of ConfigField definitions for automatic defaults
            **kwargs: Keyword arguments for dict
        """
        super().__init__(*args, **kwargs)
        self.log = logger
        self._schema_defaults: dict[str, ConfigValueType] = {}
        if schema:
            self.set_schema(schema)

    def set_schema(self, schema: ConfigItems) -> None:
        """Set or update the schema for default value lookups."""
        self._schema_defaults = {field.name: field.default for field in schema if field.default is not None}

    @overload
    def get(self, name: str) -> ConfigValueType | None: ...

    @overload
    def get(self, name: str, default: ConfigValueType) -> ConfigValueType: ...

    def get(self, name: str, default: ConfigValueType | None = None) -> ConfigValueType | None:  # type: ignore[override]
        """Get a value with schema-aware defaults.

        Args:
            name: The configuration key
            default: Fallback if key is missing and not in schema defaults

        Returns:
            The value, schema default, or provided default
        """
        if name in self:
            return dict.get(self, name)  # type: ignore[no-any-return]
        return self._schema_defaults.get(name, default)

    def get_bool(self, name: str, default: bool = False) -> bool:
        """Get a boolean value, handling loose typing."""
        return coerce_to_bool(self.get(name), default)

    def get_int(self, name: str, default: int = 0) -> int:
        """Get an integer value.

        Args:
            name: The key name
            default: Default value if key is missing or invalid

        Returns:
            The integer value
        """
        value = self.get(name)
        if value is None:
            return default
        try:
            return int(value)  # type: ignore[arg-type]
        except (ValueError, TypeError):
            self.log.warning("Invalid integer value for %s: %s", name, value)
            return default

    def get_str(self, name: str, default: str = "") -> str:
        """Get a string value."""
        value = self.get(name)
        if value is None:
            return default
        return str(value)

    def get_list(self, name: str) -> list[str]:
        """Get a list of strings, a single string becomes a one item list."""
        value = self.get(name)
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        if isinstance(value, list):
            return [str(item) for item in value]
        self.log.warning("Invalid list value for %s: %s", name, value)
        return []
