from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import keyring
from keyring.errors import KeyringError

logger = logging.getLogger(__name__)

KEYRING_SERVICE_NAME = "digicert-tlm"
SUPPORTED_BACKENDS = ("env", "keyring")


def build_api_key_keyring_ref(profile_name: str) -> str:
    """Return a deterministic keyring reference for ``profile_name`` API keys."""

    return f"{KEYRING_SERVICE_NAME}:api-key:{profile_name}"


def _split_keyring_ref(ref: str) -> tuple[str, str] | None:
    parts = ref.split(":", 1)
    if len(parts) != 2:
        return None
    service, username = parts
    if not service or not username:
        return None
    return service, username


def store_keyring_secret(ref: str, secret: str) -> tuple[bool, str | None]:
    """Persist ``secret`` to the system keyring referenced by ``ref``."""

    parsed = _split_keyring_ref(ref)
    if parsed is None:
        return False, "invalid-ref"
    service, username = parsed
    try:
        keyring.set_password(service, username, secret)
    except KeyringError as exc:
        logger.debug("Keyring write for %s failed: %s", ref, exc)
        return False, f"error:{exc.__class__.__name__}"
    return True, None


def delete_keyring_secret(ref: str) -> tuple[bool, str | None]:
    """Remove the password stored for ``ref`` from the system keyring."""

    parsed = _split_keyring_ref(ref)
    if parsed is None:
        return False, "invalid-ref"
    service, username = parsed
    try:
        keyring.delete_password(service, username)
    except KeyringError as exc:
        logger.debug("Keyring delete for %s failed: %s", ref, exc)
        return False, f"error:{exc.__class__.__name__}"
    return True, None


@dataclass
class SecretSpec:
    backend: str  # "env" or "keyring"
    ref: str  # env: VAR, keyring: SERVICE:USERNAME


def get_secret(spec: SecretSpec) -> str | None:
    backend = spec.backend.lower()
    if backend == "env":
        return os.getenv(spec.ref)
    if backend == "keyring":
        parsed = _split_keyring_ref(spec.ref)
        if parsed is None:
            return None
        service, username = parsed
        try:
            return keyring.get_password(service, username)
        except KeyringError as exc:
            logger.debug("Keyring read for %s failed: %s", spec.ref, exc)
            return None
    return None
