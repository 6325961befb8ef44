from __future__ import annotations

import os

_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module(env: str | None = None) -> str:
    """Settings module for APP_ENV (development unless production/testing is asked for)."""
    env = (env or os.getenv("APP_ENV", "development")).strip().lower()
    return _MODULES.get(env, "config.development")
