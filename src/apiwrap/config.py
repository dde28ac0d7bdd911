"""Configuration loading with XDG paths and precedence resolution.

This module handles all persistent configuration for apiwrap:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apiwrap/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- a single :class:`~apiwrap.models.GlobalConfig`
  JSON file holding the output format and per-vendor overrides.
* **Vendor profiles** -- :func:`resolve_vendor_profile` layers the config
  file and environment variables over a vendor's built-in defaults.
* **Credential resolution** -- :func:`resolve_credential` reads secrets
  from env vars, files, or interactive prompts.
"""

from __future__ import annotations

import getpass
import json
import logging
import os
import platform
import sys
from pathlib import Path
from typing import Optional

from pydantic import SecretStr

from apiwrap.exceptions import ConfigError
from apiwrap.models import AuthConfig, GlobalConfig, VendorProfile

logger = logging.getLogger(__name__)

_APP_NAME = "apiwrap"
_CONFIG_FILENAME = "config.json"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/apiwrap/`` (default ``~/.config/apiwrap/``).
    On macOS/Windows: ``~/.apiwrap/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory used for crash logs, creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apiwrap/`` (default ``~/.local/share/apiwrap/``).
    On macOS/Windows: ``~/.apiwrap/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Global config ---


def _global_config_path() -> Path:
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~apiwrap.models.GlobalConfig`, or a default
        instance when the file does not exist.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = _global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


# --- Vendor profiles ---


def _env_prefix(name: str) -> str:
    return name.upper().replace("-", "_")


def resolve_vendor_profile(
    default: VendorProfile,
    config: Optional[GlobalConfig] = None,
) -> VendorProfile:
    """Resolve the effective profile for one vendor.

    Precedence (high to low):
        1. Environment (``<VENDOR>_BASE_URL``; token variables are read
           lazily through the ``env:`` credential source)
        2. The vendor's section of ``config.json``
        3. The vendor's built-in defaults (*default*)

    Args:
        default: The vendor package's built-in profile. It is not modified.
        config: Already-loaded global config; loaded from disk when ``None``.

    Returns:
        A new :class:`~apiwrap.models.VendorProfile`.
    """
    if config is None:
        config = load_global_config()

    profile = default.model_copy(deep=True)
    override = config.vendors.get(profile.name)
    if override is not None:
        if override.base_url:
            profile.base_url = override.base_url
        if override.request is not None:
            profile.request = override.request
        if profile.auth is not None:
            if override.source:
                profile.auth.source = override.source
            if override.secret_source:
                profile.auth.secret_source = override.secret_source

    env_base_url = os.environ.get(f"{_env_prefix(profile.name)}_BASE_URL")
    if env_base_url:
        profile.base_url = env_base_url

    if not profile.base_url:
        raise ConfigError(
            f"No base URL configured for '{profile.name}'. "
            f"Set {_env_prefix(profile.name)}_BASE_URL or add it to {_global_config_path()}"
        )
    logger.debug("Resolved profile %s -> %s", profile.name, profile.base_url)
    return profile


def profile_with_token(
    default: VendorProfile,
    token: str,
    base_url: Optional[str] = None,
    secret: Optional[str] = None,
) -> VendorProfile:
    """Copy *default* with a directly supplied credential (and optional base URL)."""
    profile = default.model_copy(deep=True)
    if base_url:
        profile.base_url = base_url
    auth = profile.auth or AuthConfig(type="bearer")
    profile.auth = auth.model_copy(
        update={
            "token": SecretStr(token),
            "secret": SecretStr(secret) if secret is not None else None,
        }
    )
    return profile


# --- Credential source resolution ---


def resolve_credential(source: str) -> str:
    """Resolve a credential from its source descriptor.

    Supported formats:
        - ``"env:VAR_NAME"`` -- reads ``os.environ["VAR_NAME"]``
        - ``"file:/path/to/file"`` -- reads file content, stripped of whitespace
        - ``"prompt"`` -- prompts user interactively (requires a TTY)

    Raises:
        ConfigError: If the source can't be resolved.
    """
    if source.startswith("env:"):
        var_name = source[4:]
        value = os.environ.get(var_name)
        if value is None:
            raise ConfigError(
                f"Environment variable '{var_name}' is not set (source: {source})"
            )
        return value

    if source.startswith("file:"):
        path = Path(source[5:]).expanduser()
        if not path.is_file():
            raise ConfigError(f"Credential file not found: {path} (source: {source})")
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigError(f"Cannot read credential file {path}: {exc}") from exc

    if source == "prompt":
        if not sys.stdin.isatty():
            raise ConfigError(
                "Cannot prompt for credentials: stdin is not a TTY (source: prompt)"
            )
        return getpass.getpass("Enter credential: ")

    raise ConfigError(f"Unknown credential source format: {source}")
