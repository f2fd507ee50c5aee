from __future__ import annotations

import os

DEFAULT_POKEAPI_BASE_URL = "https://pokeapi.co/api/v2"
DEFAULT_REMOTE_API_URL = "http://localhost:8000"


def pokeapi_base_url() -> str:
    return os.getenv("POKEAPI_BASE_URL", DEFAULT_POKEAPI_BASE_URL).rstrip("/")


def remote_api_url() -> str:
    return os.getenv("REMOTE_API_URL", DEFAULT_REMOTE_API_URL).rstrip("/")


def probe_timeout_seconds() -> float:
    return float(os.getenv("PROBE_TIMEOUT_SECONDS", "1.0"))


def http_timeout_seconds() -> float:
    return float(os.getenv("HTTP_TIMEOUT_SECONDS", "10.0"))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
