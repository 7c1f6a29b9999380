from __future__ import annotations

import base64
import binascii
import hashlib
import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from cryptography.fernet import Fernet, InvalidToken

from .errors import TlmError

logger = logging.getLogger(__name__)

HOME_ENV = "TLM_HOME"
ENCRYPTION_KEY_ENV = "TLM_CONFIG_ENCRYPTION_KEY"

_SENSITIVE_KEYS = ("api_key",)
_FERNET_SALT = b"digicert-tlm-config"
_cached_cipher: Fernet | None = None
_cached_cipher_key: str | None = None


class EncryptedConfigError(TlmError):
    """Raised when encrypted configuration cannot be decrypted."""


def default_config_path() -> Path:
    home = os.path.expanduser(os.getenv(HOME_ENV, "~/.tlm"))
    return Path(home) / "config.json"


def _derive_fernet_key(raw: str) -> bytes | None:
    """Return a urlsafe base64 Fernet key derived from ``raw``.

    A value that already decodes to 32 bytes is used as-is; anything else is
    treated as a passphrase and stretched with PBKDF2.
    """

    normalized = raw.strip().encode("utf-8")
    if not normalized:
        return None

    try:
        decoded = base64.urlsafe_b64decode(normalized)
    except (binascii.Error, ValueError):
        decoded = b""

    if len(decoded) == 32:
        return normalized

    return base64.urlsafe_b64encode(
        hashlib.pbkdf2_hmac("sha256", normalized, _FERNET_SALT, 390_000, dklen=32)
    )


def _get_cipher() -> Fernet | None:
    global _cached_cipher, _cached_cipher_key

    key = os.getenv(ENCRYPTION_KEY_ENV)
    if key != _cached_cipher_key:
        _cached_cipher = None
        _cached_cipher_key = key

    if not key:
        return None
    if _cached_cipher is not None:
        return _cached_cipher

    derived = _derive_fernet_key(key)
    if not derived:
        logger.warning("%s is blank; storing config in plaintext.", ENCRYPTION_KEY_ENV)
        return None

    _cached_cipher = Fernet(derived)
    return _cached_cipher


def encrypt_field(value: str | None) -> str | None:
    """Encrypt ``value`` when an encryption key is configured."""

    if not value:
        return value

    cipher = _get_cipher()
    if cipher is None:
        return value

    token = cipher.encrypt(value.encode("utf-8"))
    return f"enc:{token.decode('utf-8')}"


def decrypt_field(value: str | None) -> str | None:
    """Decrypt ``value`` produced by :func:`encrypt_field`."""

    if not value or not value.startswith("enc:"):
        return value

    cipher = _get_cipher()
    if cipher is None:
        raise EncryptedConfigError(
            f"Encrypted TLM configuration detected but {ENCRYPTION_KEY_ENV} is not set."
        )

    try:
        decrypted = cipher.decrypt(value[4:].encode("utf-8"))
    except InvalidToken as exc:
        raise EncryptedConfigError(
            "Unable to decrypt TLM configuration; verify encryption key."
        ) from exc
    return decrypted.decode("utf-8")


def _secure_path(path: Path) -> None:
    if not path.exists():
        return

    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        else:
            path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce secure permissions for %s: %s", path, exc)


def _ensure_secure_permissions(path: Path) -> None:
    if not path.exists() or os.name == "nt":
        return

    mode = stat.S_IMODE(path.stat().st_mode)
    if mode & (stat.S_IRWXG | stat.S_IRWXO):
        logger.warning("Config file %s is group/world-accessible; resetting to 0o600.", path)
        _secure_path(path)


def _encrypt_profile_dict(profile: dict[str, Any]) -> dict[str, Any]:
    payload = dict(profile)
    for key in _SENSITIVE_KEYS:
        value = payload.get(key)
        if isinstance(value, str):
            payload[key] = encrypt_field(value)
    return payload


def _decrypt_profile_dict(profile: dict[str, Any]) -> dict[str, Any]:
    payload = dict(profile)
    for key in _SENSITIVE_KEYS:
        value = payload.get(key)
        if isinstance(value, str):
            payload[key] = decrypt_field(value)
    return payload


@dataclass
class Profile:
    """Connection settings stored under a local name."""

    name: str
    base_url: str | None = None
    api_key: str | None = None
    api_key_env: str | None = None
    secret_backend: str | None = None
    secret_ref: str | None = None
    user_agent: str | None = None
    timeout: float | None = None


_PROFILE_FIELDS = {f.name for f in fields(Profile)}


@dataclass
class ConfigData:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)


class ConfigStore:
    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else default_config_path()

    def _ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {"default": None, "profiles": {}}
        _ensure_secure_permissions(self.path)
        with self.path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        raw["profiles"] = {
            name: _decrypt_profile_dict(profile)
            for name, profile in raw.get("profiles", {}).items()
        }
        return raw

    def _write(self, data: dict[str, Any]) -> None:
        self._ensure()
        tmp = self.path.with_suffix(".tmp")
        payload = dict(data)
        payload["profiles"] = {
            name: _encrypt_profile_dict(asdict(profile))
            for name, profile in payload.get("profiles", {}).items()
        }
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, indent=2)
        _secure_path(tmp)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        profs = {}
        for name, data in raw.get("profiles", {}).items():
            known = {k: v for k, v in data.items() if k in _PROFILE_FIELDS and k != "name"}
            profs[name] = Profile(name=name, **known)
        return ConfigData(default_profile=raw.get("default"), profiles=profs)

    def save(self, cfg: ConfigData) -> None:
        self._write({"default": cfg.default_profile, "profiles": cfg.profiles})

    def get_profile(self, name: str) -> Profile | None:
        return self.load().profiles.get(name)

    def add_or_update_profile(self, profile: Profile, *, set_default: bool = False) -> ConfigData:
        """Persist ``profile`` and optionally set it as default."""

        cfg = self.load()
        cfg.profiles[profile.name] = profile
        if set_default or not cfg.default_profile:
            cfg.default_profile = profile.name
        self.save(cfg)
        return cfg

    def set_default_profile(self, name: str) -> ConfigData:
        """Mark the profile ``name`` as the default profile."""

        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        cfg.default_profile = name
        self.save(cfg)
        return cfg

    def delete_profile(self, name: str) -> ConfigData:
        cfg = self.load()
        if name not in cfg.profiles:
            raise KeyError(f"Profile '{name}' not found")
        del cfg.profiles[name]
        if cfg.default_profile == name:
            cfg.default_profile = None
        self.save(cfg)
        return cfg
