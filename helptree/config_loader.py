"""Configuration file loading utilities.

This module handles loading, parsing, and merging TOML configuration files.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import aiofiles
import aiofiles.os

from .constants import CONFIG_FILE
from .models import HelpTreeError
from .utils import merge

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading and merging configuration files.

    Supports:
    - TOML configuration files
    - Directory-based config (multiple .toml files merged)
    - Include directives for modular configuration
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log
        self._config: dict[str, Any] = {}

    @property
    def config(self) -> dict[str, Any]:
        """Return the loaded configuration."""
        return self._config

    async def load(self, config_filename: str = "") -> dict[str, Any]:
        """Load configuration from file or directory.

        Args:
            config_filename: Optional path to config file or directory.
                           If empty, uses default CONFIG_FILE location.

        Returns:
            The loaded and merged configuration dictionary.

        Raises:
            HelpTreeError: If config file not found or has syntax errors.
        """
        config = await self._open_config(config_filename, set())
        merge(self._config, config, replace=True)
        return self._config

    async def _open_config(self, config_filename: str, seen: set[Path]) -> dict[str, Any]:
        """Load config file(s) into a dictionary, following includes.

        Args:
            config_filename: Configuration file or directory path (default location if empty)
            seen: Files already loaded, to break include cycles

        Returns:
            The loaded configuration dictionary
        """
        fname = Path(os.path.expandvars(config_filename)).expanduser() if config_filename else CONFIG_FILE
        resolved = fname.resolve()
        if resolved in seen:
            self.log.warning("Skipping %s: already included", fname)
            return {}
        seen.add(resolved)

        if await aiofiles.os.path.isdir(fname):
            config = await self._load_config_directory(fname)
            base = fname
        else:
            config = await self._load_config_file(fname)
            base = fname.parent

        # Relative includes are relative to the including file
        includes = config.get("helptree", {}).get("include", [])
        for extra_config in [includes] if isinstance(includes, str) else list(includes):
            extra_path = base / Path(os.path.expandvars(extra_config)).expanduser()
            merge(config, await self._open_config(str(extra_path), seen))

        return config

    async def _load_config_directory(self, directory: Path) -> dict[str, Any]:
        """Load and merge all .toml files from a directory.

        Args:
            directory: Path to directory containing .toml files

        Returns:
            Merged configuration from all files
        """
        config: dict[str, Any] = {}
        for toml_file in sorted(await aiofiles.os.listdir(directory)):
            if not toml_file.endswith(".toml"):
                continue
            merge(config, await self._load_config_file(directory / toml_file))
        return config

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single TOML configuration file.

        Args:
            fname: Path to the configuration file

        Returns:
            Configuration dictionary

        Raises:
            HelpTreeError: If file not found or has syntax errors
        """
        if not await aiofiles.os.path.exists(fname):
            self.log.critical("Config file not found! Please create %s", fname)
            raise HelpTreeError

        self.log.info("Loading %s", fname)
        async with aiofiles.open(fname, encoding="utf-8") as f:
            content = await f.read()
        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            self.log.critical("Problem reading %s: %s", fname, e)
            raise HelpTreeError from e
