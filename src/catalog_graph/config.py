"""Configuration loading and management for catalog-graph.

Configuration sources are merged in priority order:
    1. Defaults (defined in ServerConfig)
    2. Project config (./catalog-graph.toml)
    3. Explicit config file (--config)
    4. Environment variables (PORT, DATABASE_URI, then CATALOG_* prefix)
    5. CLI overrides (passed as kwargs)

Example:
    >>> config = load_config(port=8080)
    >>> config.port
    8080
    >>> config.database_uri
    'sqlite:///catalog.db'
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal, Optional, get_type_hints

from .exceptions import ConfigurationError, InvalidConfigError

Verbosity = Literal["quiet", "normal", "verbose"]

DEFAULT_PORT = 5000
DEFAULT_DATABASE_URI = "sqlite:///catalog.db"
PROJECT_CONFIG_NAME = "catalog-graph.toml"

# Conventional unprefixed variables, lower priority than CATALOG_*.
_BARE_ENV_VARS = {
    "PORT": "port",
    "MONGO_URI": "database_uri",
    "DATABASE_URI": "database_uri",
}


@dataclass(frozen=True)
class ServerConfig:
    """Configuration for the GraphQL server and seeding commands.

    Attributes:
        database_uri: Store connection string (``sqlite:///path.db``,
            ``sqlite://:memory:`` or a bare file path). Other schemes are
            accepted here and reported by the store when it connects
        port: Port the HTTP server listens on
        host: Interface the HTTP server binds to
        verbosity: Logging verbosity level
        log_file: Optional path for a plain-text log file
    """

    database_uri: str = DEFAULT_DATABASE_URI
    port: int = DEFAULT_PORT
    host: str = "127.0.0.1"
    verbosity: Verbosity = "normal"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if not self.database_uri:
            raise ValueError("database_uri must not be empty")
        if not 1 <= self.port <= 65535:
            raise ValueError("port must be between 1 and 65535")
        if self.verbosity not in ("quiet", "normal", "verbose"):
            raise ValueError("verbosity must be one of quiet, normal, verbose")

    @property
    def verbose(self) -> bool:
        return self.verbosity == "verbose"

    @property
    def quiet(self) -> bool:
        return self.verbosity == "quiet"


def load_config(config_file: Optional[Path] = None, **overrides) -> ServerConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides (typically from CLI flags). ``None``
            values are ignored so unset flags don't mask lower sources.

    Returns:
        Validated ServerConfig instance

    Raises:
        ConfigurationError: If a config file is invalid or missing
        ConfigurationError: If the merged configuration fails validation
        InvalidConfigError: If an environment value cannot be parsed
    """
    merged: dict = {}

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        try:
            merged.update(_load_toml_file(project_config))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid project config '{project_config}': {e}")

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        try:
            merged.update(_load_toml_file(config_file))
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigurationError(f"Invalid config file '{config_file}': {e}")

    merged.update(_load_env_vars())

    if "verbose" in overrides:
        if overrides["verbose"]:
            overrides["verbosity"] = "verbose"
        del overrides["verbose"]
    if "quiet" in overrides:
        if overrides["quiet"]:
            overrides["verbosity"] = "quiet"
        del overrides["quiet"]

    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ServerConfig(**merged)
    except (TypeError, ValueError) as e:
        # Unknown field or failed validation
        raise ConfigurationError(f"Invalid configuration: {e}")


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from environment variables.

    Supported environment variables:
        PORT: int
        MONGO_URI / DATABASE_URI: str
        CATALOG_DATABASE_URI: str
        CATALOG_PORT: int
        CATALOG_HOST: str
        CATALOG_VERBOSITY: quiet/normal/verbose
        CATALOG_LOG_FILE: str

    Returns:
        Dict of field_name -> parsed_value for any variables found.
    """
    type_hints = get_type_hints(ServerConfig)

    result: dict[str, Any] = {}

    candidates = [(env_key, field_name) for env_key, field_name in _BARE_ENV_VARS.items()]
    candidates += [
        (f"CATALOG_{field_name.upper()}", field_name)
        for field_name in ServerConfig.__dataclass_fields__
    ]

    for env_key, field_name in candidates:
        env_value = os.environ.get(env_key)
        if env_value is None or env_value == "":
            continue

        try:
            result[field_name] = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse environment variable string to the field's type.

    Raises:
        ValueError: If value can't be parsed to expected type
    """
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    if type(None) in args:
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types:
            type_hint = non_none_types[0]

    if type_hint is int:
        return int(value)

    return value


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return the ``[server]`` table, or the top level."""
    with open(path, "rb") as f:
        data = tomllib.load(f)
    section = data.get("server")
    if isinstance(section, dict):
        return section
    return data
