from __future__ import annotations

import importlib
import logging
import pkgutil
from types import ModuleType
from typing import Iterator

from fastapi import FastAPI

logger = logging.getLogger(__name__)

ROUTERS_PACKAGE = __name__


def _should_skip_module(module_name: str) -> bool:
    return module_name.rsplit(".", 1)[-1].startswith("_")


def _router_modules(package: ModuleType) -> Iterator[ModuleType]:
    for info in pkgutil.walk_packages(package.__path__, prefix=f"{package.__name__}."):
        if _should_skip_module(info.name):
            logger.debug("Skipping private router module: %s", info.name)
            continue
        yield importlib.import_module(info.name)


def register_all_routers(app: FastAPI, *, base_package: str = ROUTERS_PACKAGE, prefix: str = "") -> None:
    """
    Mount every module-level ``router`` found under ``base_package``.

    Modules named with a leading underscore are ignored. Optional module
    attributes: ROUTER_PREFIX is appended to ``prefix``, ROUTER_TAG becomes the
    OpenAPI tag, INCLUDE_ROUTER_IN_SCHEMA=False hides the routes from the schema.
    """
    try:
        package = importlib.import_module(base_package)
    except ImportError as exc:
        raise RuntimeError(f"Could not import router package '{base_package}': {exc}") from exc
    if not hasattr(package, "__path__"):
        raise RuntimeError(f"'{base_package}' is a module, not a package.")

    for module in _router_modules(package):
        router = getattr(module, "router", None)
        if router is None:
            continue
        mount_prefix = prefix.rstrip("/") + getattr(module, "ROUTER_PREFIX", "")
        tag = getattr(module, "ROUTER_TAG", None)
        app.include_router(
            router,
            prefix=mount_prefix,
            tags=[tag] if tag else None,
            include_in_schema=getattr(module, "INCLUDE_ROUTER_IN_SCHEMA", True),
        )
        logger.debug("Mounted %s at %r", module.__name__, mount_prefix or "/")
