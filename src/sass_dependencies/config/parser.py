"""Configuration parser for sass-deps.

This module reads the optional ``sass-deps.toml`` file of a project and
builds the settings the dependency resolver and the project filter run
with: the project root used as the filter boundary and the load paths
searched for imports.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import toml

from sass_dependencies.error_handling import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "sass-deps.toml"
DEFAULT_PROJECT_ROOT = Path("assets") / "css"


@dataclass
class SassDepsConfig:
    """Settings for one sass-deps run.

    Attributes:
        project_root: Directory boundary for dependencies that are kept
        load_paths: Extra directories searched when resolving imports

    """

    project_root: Path
    load_paths: list[Path] = field(default_factory=list)

    def add_load_path(self, path: Path | str) -> None:
        """Append a directory to the end of the load-path list."""
        self.load_paths.append(Path(path))


class SassDepsConfigParser:
    """Parser for sass-deps configuration files."""

    def __init__(self, config_file_name: str = DEFAULT_CONFIG_FILE) -> None:
        """Initialize configuration parser.

        Args:
            config_file_name: File name looked up in the base directory

        """
        self.config_file_name = config_file_name

    def default_config(self, base_dir: Path) -> SassDepsConfig:
        """Build the configuration used when no file is present.

        Args:
            base_dir: Directory the project root is relative to

        Returns:
            Default configuration

        """
        return SassDepsConfig(project_root=(base_dir / DEFAULT_PROJECT_ROOT).absolute())

    def parse_config(
        self,
        base_dir: Path,
        config_file: Path | None = None,
    ) -> SassDepsConfig:
        """Load the configuration for a project.

        Args:
            base_dir: Project directory, normally the current directory
            config_file: Explicit configuration file; must exist when given

        Returns:
            Parsed configuration

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid

        """
        if config_file is None:
            candidate = base_dir / self.config_file_name
            if not candidate.is_file():
                logger.debug(f"No {self.config_file_name} in {base_dir}, using defaults")
                return self.default_config(base_dir)
            config_file = candidate
        elif not config_file.is_file():
            error_msg = f"Configuration file not found: {config_file}"
            raise ConfigurationError(error_msg, config_file=config_file)

        logger.debug(f"Loading configuration from {config_file}")
        raw = self._load_toml(config_file)
        return self.build_config(raw, config_file.absolute().parent, config_file)

    def build_config(
        self,
        raw: dict[str, Any],
        base_dir: Path,
        config_file: Path | None = None,
    ) -> SassDepsConfig:
        """Validate raw configuration values and build the settings.

        Values may sit at the top level or under a ``[sass-deps]`` table.
        Relative paths are resolved against ``base_dir``.

        Args:
            raw: Decoded TOML document
            base_dir: Directory relative paths are resolved against
            config_file: File the values came from, for error reporting

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If a value has the wrong type

        """
        section = raw.get("sass-deps", raw)
        if not isinstance(section, dict):
            error_msg = "[sass-deps] must be a table"
            raise ConfigurationError(error_msg, config_file=config_file)

        config = self.default_config(base_dir)

        project_root = section.get("project_root")
        if project_root is not None:
            if not isinstance(project_root, str):
                error_msg = f"project_root must be a string, got {type(project_root).__name__}"
                raise ConfigurationError(
                    error_msg,
                    config_file=config_file,
                    context={"project_root": project_root},
                )
            config.project_root = self._resolve(project_root, base_dir)

        load_paths = section.get("load_paths", [])
        if not isinstance(load_paths, list) or not all(
            isinstance(path, str) for path in load_paths
        ):
            error_msg = "load_paths must be a list of strings"
            raise ConfigurationError(
                error_msg,
                config_file=config_file,
                context={"load_paths": load_paths},
            )
        for path in load_paths:
            config.add_load_path(self._resolve(path, base_dir))

        logger.debug(f"Project root: {config.project_root}")
        logger.debug(f"Configured load paths: {[str(p) for p in config.load_paths]}")
        return config

    def _load_toml(self, config_file: Path) -> dict[str, Any]:
        """Read and decode a TOML configuration file.

        Args:
            config_file: File to read

        Returns:
            Decoded TOML document

        Raises:
            ConfigurationError: If the file cannot be read or decoded

        """
        try:
            return toml.load(config_file)
        except toml.TomlDecodeError as e:
            error_msg = f"Invalid TOML in {config_file}: {e}"
            raise ConfigurationError(
                error_msg,
                config_file=config_file,
                context={"original_error": str(e)},
            ) from e
        except OSError as e:
            error_msg = f"Could not read {config_file}: {e}"
            raise ConfigurationError(
                error_msg,
                config_file=config_file,
                context={"original_error": str(e)},
            ) from e

    @staticmethod
    def _resolve(value: str, base_dir: Path) -> Path:
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = base_dir / path
        return path.absolute()
