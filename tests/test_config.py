"""Tests for apiwrap.config -- XDG paths, global config, profile precedence, credentials."""

from __future__ import annotations

import io
import json
from pathlib import Path
from typing import Any

import pytest

from apiwrap.config import (
    get_config_dir,
    get_data_dir,
    load_global_config,
    profile_with_token,
    resolve_credential,
    resolve_vendor_profile,
)
from apiwrap.exceptions import ConfigError
from apiwrap.models import AuthConfig, GlobalConfig, RequestConfig, VendorOverride, VendorProfile


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")


def _default_profile(base_url: str | None = "https://api.acme.test") -> VendorProfile:
    return VendorProfile(
        name="acme",
        base_url=base_url,
        auth=AuthConfig(type="bearer", source="env:ACME_API_TOKEN"),
    )


# ---------------------------------------------------------------------------
# XDG path resolution
# ---------------------------------------------------------------------------


class TestXDGPaths:
    def test_config_dir_xdg_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("apiwrap.config._is_xdg_platform", lambda: True)
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        result = get_config_dir()
        assert result == tmp_path / ".config" / "apiwrap"
        assert result.is_dir()

    def test_config_dir_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "custom_config"
        monkeypatch.setattr("apiwrap.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(custom))

        assert get_config_dir() == custom / "apiwrap"

    def test_data_dir_xdg_custom(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("apiwrap.config._is_xdg_platform", lambda: True)
        monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

        result = get_data_dir()
        assert result == tmp_path / "data" / "apiwrap"
        assert result.is_dir()

    def test_fallback_on_non_xdg_platform(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("apiwrap.config._is_xdg_platform", lambda: False)
        monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))

        assert get_config_dir() == tmp_path / ".apiwrap"
        assert get_data_dir() == tmp_path / ".apiwrap" / "logs"


# ---------------------------------------------------------------------------
# Global config
# ---------------------------------------------------------------------------


class TestGlobalConfig:
    def test_defaults_when_missing(self, isolated_config: Path) -> None:
        config = load_global_config()
        assert config.output.format == "auto"
        assert config.vendors == {}

    def test_loads_vendor_overrides(self, isolated_config: Path) -> None:
        _write_json(
            isolated_config / "config" / "apiwrap" / "config.json",
            {"vendors": {"acme": {"base_url": "https://eu.acme.test"}}},
        )

        config = load_global_config()
        assert config.vendors["acme"].base_url == "https://eu.acme.test"

    def test_invalid_json_raises_config_error(self, isolated_config: Path) -> None:
        path = isolated_config / "config" / "apiwrap" / "config.json"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError, match="Invalid global config"):
            load_global_config()

    def test_invalid_schema_raises_config_error(self, isolated_config: Path) -> None:
        _write_json(
            isolated_config / "config" / "apiwrap" / "config.json",
            {"vendors": {"acme": {"request": {"timeout": "soon"}}}},
        )

        with pytest.raises(ConfigError):
            load_global_config()


# ---------------------------------------------------------------------------
# Vendor profile precedence
# ---------------------------------------------------------------------------


class TestResolveVendorProfile:
    def test_defaults_pass_through(self, isolated_config: Path) -> None:
        profile = resolve_vendor_profile(_default_profile(), GlobalConfig())
        assert profile.base_url == "https://api.acme.test"
        assert profile.auth.source == "env:ACME_API_TOKEN"

    def test_config_overrides_defaults(self, isolated_config: Path) -> None:
        config = GlobalConfig(
            vendors={
                "acme": VendorOverride(
                    base_url="https://eu.acme.test",
                    source="file:/tmp/acme-token",
                    request=RequestConfig(max_retries=0),
                )
            }
        )

        profile = resolve_vendor_profile(_default_profile(), config)
        assert profile.base_url == "https://eu.acme.test"
        assert profile.auth.source == "file:/tmp/acme-token"
        assert profile.request.max_retries == 0

    def test_env_base_url_beats_config(
        self, isolated_config: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("ACME_BASE_URL", "https://staging.acme.test")
        config = GlobalConfig(vendors={"acme": VendorOverride(base_url="https://eu.acme.test")})

        profile = resolve_vendor_profile(_default_profile(), config)
        assert profile.base_url == "https://staging.acme.test"

    def test_default_is_not_modified(self, isolated_config: Path) -> None:
        default = _default_profile()
        config = GlobalConfig(vendors={"acme": VendorOverride(base_url="https://eu.acme.test")})

        resolve_vendor_profile(default, config)
        assert default.base_url == "https://api.acme.test"

    def test_missing_base_url_raises(self, isolated_config: Path) -> None:
        with pytest.raises(ConfigError, match="ACME_BASE_URL"):
            resolve_vendor_profile(_default_profile(base_url=None), GlobalConfig())

    def test_loads_config_from_disk_when_not_given(self, isolated_config: Path) -> None:
        _write_json(
            isolated_config / "config" / "apiwrap" / "config.json",
            {"vendors": {"acme": {"base_url": "https://disk.acme.test"}}},
        )

        assert resolve_vendor_profile(_default_profile()).base_url == "https://disk.acme.test"


class TestProfileWithToken:
    def test_token_and_base_url_are_set(self) -> None:
        profile = profile_with_token(_default_profile(), "tok", base_url="https://other.test")

        assert profile.base_url == "https://other.test"
        assert profile.auth.resolve_credential() == "tok"
        assert profile.auth.type == "bearer"

    def test_secret_is_carried(self) -> None:
        profile = profile_with_token(_default_profile(), "key", secret="alice")
        assert profile.auth.resolve_secret() == "alice"

    def test_profile_without_auth_gets_bearer(self) -> None:
        default = VendorProfile(name="bare", base_url="https://bare.test")
        assert profile_with_token(default, "tok").auth.type == "bearer"


# ---------------------------------------------------------------------------
# Credential sources
# ---------------------------------------------------------------------------


class TestResolveCredential:
    def test_env_source(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ACME_API_TOKEN", "secret-value")
        assert resolve_credential("env:ACME_API_TOKEN") == "secret-value"

    def test_env_source_missing_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ACME_API_TOKEN", raising=False)
        with pytest.raises(ConfigError, match="ACME_API_TOKEN"):
            resolve_credential("env:ACME_API_TOKEN")

    def test_file_source_is_stripped(self, tmp_path: Path) -> None:
        path = tmp_path / "token"
        path.write_text("  file-token\n", encoding="utf-8")
        assert resolve_credential(f"file:{path}") == "file-token"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            resolve_credential(f"file:{tmp_path / 'nope'}")

    def test_prompt_without_tty_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("apiwrap.config.sys.stdin", io.StringIO())
        with pytest.raises(ConfigError, match="not a TTY"):
            resolve_credential("prompt")

    def test_unknown_source_raises(self) -> None:
        with pytest.raises(ConfigError, match="Unknown credential source"):
            resolve_credential("vault:acme")
