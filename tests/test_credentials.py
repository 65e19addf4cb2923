"""Tests for GitHub identity token discovery."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from copilot_oauth.credentials import (
    ConfigFileCredentialProvider,
    CredentialProvider,
    CredentialResolver,
    EnvironmentCredentialProvider,
    get_config_path,
    get_github_token,
)
from utils.errors import ConfigDirectoryNotFound, CredentialNotFound, DecodeError


def write_token_file(root: Path, name: str, data: object) -> Path:
    directory = root / "github-copilot"
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(json.dumps(data) if not isinstance(data, str) else data)
    return path


class StaticProvider(CredentialProvider):
    name = "static"

    def __init__(self, token: str | None) -> None:
        self.token = token
        self.calls = 0

    def get_token(self) -> str | None:
        self.calls += 1
        return self.token


class TestGetConfigPath:
    def test_prefers_xdg_config_home(self) -> None:
        env = {"XDG_CONFIG_HOME": "/xdg", "HOME": "/home/me", "LOCALAPPDATA": "C:/local"}
        assert get_config_path(env, "linux") == Path("/xdg")
        assert get_config_path(env, "win32") == Path("/xdg")

    def test_empty_xdg_is_ignored(self) -> None:
        assert get_config_path({"XDG_CONFIG_HOME": "", "HOME": "/home/me"}, "linux") == Path("/home/me/.config")

    def test_windows_uses_local_app_data(self) -> None:
        assert get_config_path({"LOCALAPPDATA": "C:/local", "HOME": "/home/me"}, "win32") == Path("C:/local")

    def test_windows_does_not_fall_back_to_home(self) -> None:
        with pytest.raises(ConfigDirectoryNotFound):
            get_config_path({"HOME": "/home/me"}, "win32")

    def test_empty_home_is_joined_as_is(self) -> None:
        assert get_config_path({"HOME": ""}, "linux") == Path("/.config")

    def test_nothing_set(self) -> None:
        with pytest.raises(ConfigDirectoryNotFound):
            get_config_path({}, "linux")


class TestConfigFileProvider:
    def test_reads_github_com_entry(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", {"github.com": {"user": "me", "oauth_token": "gho_hosts"}})
        provider = ConfigFileCredentialProvider(config_root=tmp_path)
        assert provider.get_token() == "gho_hosts"

    def test_key_only_needs_to_contain_github_com(self, tmp_path: Path) -> None:
        write_token_file(
            tmp_path,
            "apps.json",
            {
                "gitlab.example:Iv1": {"oauth_token": "wrong"},
                "github.com:Iv1.b507a08c87ecfe98": {"oauth_token": "gho_apps"},
            },
        )
        provider = ConfigFileCredentialProvider(config_root=tmp_path)
        assert provider.get_token() == "gho_apps"

    def test_hosts_json_wins_even_without_token(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", {"github.com": {"user": "me"}})
        write_token_file(tmp_path, "apps.json", {"github.com:app": {"oauth_token": "gho_apps"}})
        provider = ConfigFileCredentialProvider(config_root=tmp_path)
        assert provider.get_token() is None

        resolver = CredentialResolver([provider])
        with pytest.raises(CredentialNotFound):
            resolver.resolve()

    def test_falls_back_to_apps_json_when_hosts_missing(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "apps.json", {"github.com:app": {"oauth_token": "gho_apps"}})
        assert ConfigFileCredentialProvider(config_root=tmp_path).get_token() == "gho_apps"

    def test_non_string_token_is_skipped(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", {"github.com": {"oauth_token": 42}})
        assert ConfigFileCredentialProvider(config_root=tmp_path).get_token() is None

    def test_malformed_json_raises_decode_error(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", "{not json")
        write_token_file(tmp_path, "apps.json", {"github.com": {"oauth_token": "gho_apps"}})
        with pytest.raises(DecodeError) as exc_info:
            ConfigFileCredentialProvider(config_root=tmp_path).get_token()
        assert "hosts.json" in str(exc_info.value)

    def test_invalid_utf8_raises_decode_error(self, tmp_path: Path) -> None:
        path = write_token_file(tmp_path, "hosts.json", "")
        path.write_bytes(b'{"github.com": {"oauth_token": "\xff\xfe"}}')
        with pytest.raises(DecodeError) as exc_info:
            ConfigFileCredentialProvider(config_root=tmp_path).get_token()
        assert "hosts.json" in str(exc_info.value)

    def test_json_array_raises_decode_error(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", ["github.com"])
        with pytest.raises(DecodeError):
            ConfigFileCredentialProvider(config_root=tmp_path).get_token()

    def test_config_root_from_environment(self, tmp_path: Path) -> None:
        write_token_file(tmp_path / ".config", "hosts.json", {"github.com": {"oauth_token": "gho_home"}})
        provider = ConfigFileCredentialProvider(environ={"HOME": str(tmp_path)}, platform="linux")
        assert provider.get_token() == "gho_home"


class TestEnvironmentProvider:
    def test_requires_codespaces_marker(self) -> None:
        assert EnvironmentCredentialProvider({"GITHUB_TOKEN": "ghu_env"}).get_token() is None

    def test_returns_token_in_codespaces(self) -> None:
        env = {"GITHUB_TOKEN": "ghu_env", "CODESPACES": "true"}
        assert EnvironmentCredentialProvider(env).get_token() == "ghu_env"


class TestResolver:
    def test_first_provider_with_token_wins(self) -> None:
        first, second = StaticProvider(None), StaticProvider("second")
        third = StaticProvider("third")
        assert CredentialResolver([first, second, third]).resolve() == "second"
        assert third.calls == 0

    def test_no_token_anywhere(self) -> None:
        with pytest.raises(CredentialNotFound):
            CredentialResolver([StaticProvider(None)]).resolve()

    def test_codespaces_skips_filesystem(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def fail(*args, **kwargs):
            raise AssertionError("filesystem must not be touched")

        monkeypatch.setattr(Path, "exists", fail)
        monkeypatch.setattr(Path, "read_text", fail)
        env = {"GITHUB_TOKEN": "ghu_env_verbatim", "CODESPACES": "true", "HOME": str(tmp_path)}
        assert get_github_token(env, "linux") == "ghu_env_verbatim"

    def test_default_chain_reads_files_outside_codespaces(self, tmp_path: Path) -> None:
        write_token_file(tmp_path, "hosts.json", {"github.com": {"oauth_token": "gho_file"}})
        env = {"GITHUB_TOKEN": "ghu_env", "XDG_CONFIG_HOME": str(tmp_path)}
        assert get_github_token(env, "linux") == "gho_file"

    def test_missing_config_dir(self) -> None:
        with pytest.raises(ConfigDirectoryNotFound):
            get_github_token({}, "linux")

    def test_missing_files(self, tmp_path: Path) -> None:
        with pytest.raises(CredentialNotFound):
            get_github_token({"XDG_CONFIG_HOME": str(tmp_path)}, "linux")
