from .core.env import Env, get_env, pick
from .core.logging import setup_logging
from .settings import AppSettings, get_app_settings

__all__ = [
    "AppSettings",
    "Env",
    "get_app_settings",
    "get_env",
    "pick",
    "setup_logging",
]
