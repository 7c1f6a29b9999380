from __future__ import annotations

import json
import os
import stat
from pathlib import Path

import pytest
from cryptography.fernet import Fernet

import digicert_tlm.config as config_module
from digicert_tlm.config import (
    ConfigData,
    ConfigStore,
    EncryptedConfigError,
    Profile,
    default_config_path,
)


@pytest.fixture(autouse=True)
def _reset_cipher(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_module, "_cached_cipher", None, raising=False)
    monkeypatch.setattr(config_module, "_cached_cipher_key", None, raising=False)


def test_default_path_follows_tlm_home(isolated_home: Path) -> None:
    assert default_config_path() == isolated_home / "config.json"
    assert ConfigStore().path == isolated_home / "config.json"


def test_missing_file_loads_empty(tmp_path: Path) -> None:
    cfg = ConfigStore(tmp_path / "none.json").load()

    assert cfg.default_profile is None
    assert cfg.profiles == {}


def test_first_profile_becomes_default(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "config.json")

    store.add_or_update_profile(Profile(name="prod", base_url="https://tlm.example.test"))
    cfg = store.add_or_update_profile(Profile(name="dev"))

    assert cfg.default_profile == "prod"
    assert store.get_profile("prod") == Profile(name="prod", base_url="https://tlm.example.test")


def test_set_default_and_delete(tmp_path: Path) -> None:
    store = ConfigStore(tmp_path / "config.json")
    store.add_or_update_profile(Profile(name="a"))
    store.add_or_update_profile(Profile(name="b"))

    assert store.set_default_profile("b").default_profile == "b"
    cfg = store.delete_profile("b")

    assert cfg.default_profile is None
    assert list(cfg.profiles) == ["a"]
    with pytest.raises(KeyError):
        store.set_default_profile("missing")
    with pytest.raises(KeyError):
        store.delete_profile("missing")


def test_unknown_keys_are_ignored(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "default": "legacy",
                "profiles": {"legacy": {"name": "legacy", "timeout": 5, "unknown_field": 1}},
            }
        ),
        encoding="utf-8",
    )

    profile = ConfigStore(path).load().profiles["legacy"]

    assert profile.timeout == 5
    assert "unknown_field" not in profile.__dict__


def test_plaintext_without_encryption_key(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    ConfigStore(path).add_or_update_profile(Profile(name="p", api_key="plain-key"))

    raw = json.loads(path.read_text(encoding="utf-8"))

    assert raw["profiles"]["p"]["api_key"] == "plain-key"


@pytest.mark.parametrize("use_passphrase", [False, True])
def test_api_key_encryption_round_trip(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, use_passphrase: bool
) -> None:
    key = "correct horse battery staple" if use_passphrase else Fernet.generate_key().decode()
    monkeypatch.setenv("TLM_CONFIG_ENCRYPTION_KEY", key)
    path = tmp_path / "config.json"
    store = ConfigStore(path)

    store.save(ConfigData(default_profile="s", profiles={"s": Profile(name="s", api_key="secret")}))

    stored = json.loads(path.read_text(encoding="utf-8"))["profiles"]["s"]
    assert stored["api_key"].startswith("enc:")
    assert store.load().profiles["s"].api_key == "secret"


def test_encrypted_value_without_key(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TLM_CONFIG_ENCRYPTION_KEY", Fernet.generate_key().decode())
    path = tmp_path / "config.json"
    ConfigStore(path).add_or_update_profile(Profile(name="s", api_key="secret"))
    monkeypatch.delenv("TLM_CONFIG_ENCRYPTION_KEY")

    with pytest.raises(EncryptedConfigError):
        ConfigStore(path).load()


def test_wrong_key_is_reported(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TLM_CONFIG_ENCRYPTION_KEY", Fernet.generate_key().decode())
    path = tmp_path / "config.json"
    ConfigStore(path).add_or_update_profile(Profile(name="s", api_key="secret"))
    monkeypatch.setenv("TLM_CONFIG_ENCRYPTION_KEY", Fernet.generate_key().decode())

    with pytest.raises(EncryptedConfigError, match="verify encryption key"):
        ConfigStore(path).load()


@pytest.mark.skipif(os.name == "nt", reason="POSIX permissions only")
def test_permissions_are_tightened(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "config.json"
    store = ConfigStore(path)
    store.add_or_update_profile(Profile(name="p"))
    assert stat.S_IMODE(path.stat().st_mode) == 0o600

    path.chmod(0o644)
    with caplog.at_level("WARNING"):
        store.load()

    assert stat.S_IMODE(path.stat().st_mode) == 0o600
    assert "resetting to 0o600" in caplog.text
