from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return list(default)
    parsed = json.loads(value)
    if not isinstance(parsed, list):
        raise ValueError(f"{name} must be a JSON list.")
    return [str(item) for item in parsed]


@dataclass(frozen=True)
class Settings:
    protocol_name: str
    significant_digits: int
    cors_allow_origins: list[str]
    log_level: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        protocol_name=_env("DESCRIPTOR_PROTOCOL_NAME", "Uniswap V3"),
        significant_digits=int(_env("DESCRIPTOR_SIGNIFICANT_DIGITS", "5")),
        cors_allow_origins=_json_list("CORS_ALLOW_ORIGINS", ["*"]),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
