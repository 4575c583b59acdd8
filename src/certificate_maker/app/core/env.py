from __future__ import annotations

import os
import warnings
from enum import StrEnum
from functools import cache
from typing import Any


class Env(StrEnum):
    LOCAL = "local"
    DEV = "dev"
    TEST = "test"
    PROD = "prod"


# Spellings seen in deploy configs for APP_ENV
ALIASES: dict[str, Env] = {
    "development": Env.DEV,
    "testing": Env.TEST,
    "ci": Env.TEST,
    "production": Env.PROD,
}


def normalize_env(raw: str | None) -> Env | None:
    key = (raw or "").strip().lower()
    if not key:
        return None
    try:
        return Env(key)
    except ValueError:
        return ALIASES.get(key)


@cache
def get_env() -> Env:
    """
    The deployment environment named by APP_ENV, read once per process.

    Anything unrecognised runs as LOCAL and emits a RuntimeWarning.
    """
    raw = os.getenv("APP_ENV")
    resolved = normalize_env(raw)
    if resolved is not None:
        return resolved
    if raw:
        warnings.warn(f"APP_ENV={raw!r} is not a known environment; using 'local'.", RuntimeWarning, stacklevel=2)
    return Env.LOCAL


def pick(*, prod: Any, nonprod: Any, env: Env | None = None) -> Any:
    """
    ``prod`` when running in prod, ``nonprod`` everywhere else.

    Example:
        pick(prod="json", nonprod="plain")
    """
    return prod if (env or get_env()) is Env.PROD else nonprod
