from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class IntakeConfig:
    host: str
    port: int
    max_input_chars: int
    oembed_timeout_sec: int


def _env_int(name: str, default: int) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be > 0")
    return value


def load_intake_config() -> IntakeConfig:
    host = (os.getenv("INTAKE_HOST") or "127.0.0.1").strip() or "127.0.0.1"
    return IntakeConfig(
        host=host,
        port=_env_int("INTAKE_PORT", 8000),
        max_input_chars=_env_int("MAX_INPUT_CHARS", 2048),
        oembed_timeout_sec=_env_int("OEMBED_TIMEOUT_SEC", 15),
    )


def configure_logging() -> None:
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
