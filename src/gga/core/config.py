"""Configuration loading for gga.

Values come from three layers, highest precedence first: an explicit
environment mapping (``OLLAMA_HOST``, ``GGA_TIMEOUT``), ``config.toml`` in the
config directory, and compiled-in defaults. The environment is always passed
in explicitly; nothing below the CLI reads ``os.environ``.
"""

import math
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from gga.core.host_validation import DEFAULT_OLLAMA_HOST, OLLAMA_HOST_ENV_VAR
from gga.gateway.ollama.abc import DEFAULT_TIMEOUT_SECONDS

CONFIG_DIR_ENV_VAR = "GGA_CONFIG_DIR"
TIMEOUT_ENV_VAR = "GGA_TIMEOUT"
CONFIG_FILENAME = "config.toml"

HostSource = Literal["env", "config", "default"]


class ConfigError(ValueError):
    """Raised when config.toml or an environment value cannot be used."""


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of config.toml. None means "not set"."""

    default_provider: str | None
    ollama_host: str | None
    timeout_seconds: float | None


@dataclass(frozen=True)
class GgaConfig:
    """Effective configuration after applying environment overrides.

    The Ollama host is carried unvalidated; the router validates it on
    every call and fails fast with InvalidHost.
    """

    default_provider: str | None
    ollama_host: str
    host_source: HostSource
    timeout_seconds: float


def default_config_dir(environ: Mapping[str, str]) -> Path:
    """Return $GGA_CONFIG_DIR if set, otherwise ~/.config/gga."""
    override = environ.get(CONFIG_DIR_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config" / "gga"


def _optional_str(section: Mapping[str, object], key: str, where: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{where}.{key} must be a string, got {type(value).__name__}")
    return value


def _parse_timeout(value: object, where: str) -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ConfigError(f"{where} must be a number, got {type(value).__name__}")
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{where} must be a positive number, got {value}")
    return float(value)


def load_config(config_dir: Path) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Example config:
      [provider]
      default = "ollama:llama3.2"

      [ollama]
      host = "http://localhost:11434"
      timeout_seconds = 300

    Raises:
        ConfigError: If the file is not valid TOML or a value has the wrong type
    """
    cfg_path = config_dir / CONFIG_FILENAME
    if not cfg_path.exists():
        return LoadedConfig(default_provider=None, ollama_host=None, timeout_seconds=None)

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {cfg_path}: {e}") from e

    provider = data.get("provider", {})
    ollama = data.get("ollama", {})
    if not isinstance(provider, dict) or not isinstance(ollama, dict):
        raise ConfigError(f"[provider] and [ollama] in {cfg_path} must be tables")

    timeout_raw = ollama.get("timeout_seconds")
    timeout = None
    if timeout_raw is not None:
        timeout = _parse_timeout(timeout_raw, "ollama.timeout_seconds")

    return LoadedConfig(
        default_provider=_optional_str(provider, "default", "provider"),
        ollama_host=_optional_str(ollama, "host", "ollama"),
        timeout_seconds=timeout,
    )


def resolve_config(loaded: LoadedConfig, environ: Mapping[str, str]) -> GgaConfig:
    """Apply environment overrides to loaded config.

    Args:
        loaded: Values from config.toml
        environ: Environment mapping (os.environ at the CLI boundary, a dict in tests)

    Returns:
        Effective GgaConfig

    Raises:
        ConfigError: If GGA_TIMEOUT is not a positive number
    """
    env_host = environ.get(OLLAMA_HOST_ENV_VAR)
    host_source: HostSource
    if env_host:
        host, host_source = env_host, "env"
    elif loaded.ollama_host is not None:
        host, host_source = loaded.ollama_host, "config"
    else:
        host, host_source = DEFAULT_OLLAMA_HOST, "default"

    timeout = DEFAULT_TIMEOUT_SECONDS
    if loaded.timeout_seconds is not None:
        timeout = loaded.timeout_seconds
    env_timeout = environ.get(TIMEOUT_ENV_VAR)
    if env_timeout:
        try:
            parsed = float(env_timeout)
        except ValueError as e:
            raise ConfigError(f"{TIMEOUT_ENV_VAR} must be a number, got {env_timeout!r}") from e
        timeout = _parse_timeout(parsed, TIMEOUT_ENV_VAR)

    return GgaConfig(
        default_provider=loaded.default_provider,
        ollama_host=host,
        host_source=host_source,
        timeout_seconds=timeout,
    )


def load_effective_config(environ: Mapping[str, str]) -> GgaConfig:
    """Load config.toml from the default directory and apply overrides."""
    return resolve_config(load_config(default_config_dir(environ)), environ)
