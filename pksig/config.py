"""Runtime settings read from the environment (and a `.env` file if present).

Variables:
 - SIGNATURE_ALGORITHM  policy name, default RSA-SHA256
 - LOG_LEVEL            logging level for the CLI, default WARNING
 - PRIVATE_KEY_PASSWORD passphrase for an encrypted private key PEM

Command line flags take precedence over all of these.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from pksig.crypto.policy import DEFAULT_POLICY


@dataclass(frozen=True)
class Settings:
    algorithm: str = DEFAULT_POLICY.name
    log_level: str = "WARNING"
    key_password: Optional[bytes] = None


def load_settings(dotenv_path: str | None = None) -> Settings:
    """Load `.env` (without overriding real env vars) and build Settings."""
    load_dotenv(dotenv_path)

    password = os.getenv("PRIVATE_KEY_PASSWORD")
    return Settings(
        algorithm=os.getenv("SIGNATURE_ALGORITHM", DEFAULT_POLICY.name),
        log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        key_password=password.encode("utf-8") if password else None,
    )
