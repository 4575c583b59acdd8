from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from certificate_maker.exceptions import (
    CertificateNotFoundError,
    InvalidCertificateError,
    InvalidObjectIdError,
    StoreError,
)

logger = logging.getLogger(__name__)


def _detail(status: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"detail": detail})


def format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "malformed payload"


async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _detail(400, f"Invalid request body: {format_validation_errors(exc)}")


async def _invalid_certificate(request: Request, exc: InvalidCertificateError) -> JSONResponse:
    return _detail(400, str(exc))


async def _invalid_object_id(request: Request, exc: InvalidObjectIdError) -> JSONResponse:
    return _detail(400, f"Invalid ID format: {exc}")


async def _not_found(request: Request, exc: CertificateNotFoundError) -> JSONResponse:
    return _detail(404, "Certificate not found")


async def _store_error(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(
        "Store error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        extra={"http_method": request.method, "path": request.url.path, "status_code": 500},
    )
    return _detail(500, f"Database error: {exc}")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidCertificateError, _invalid_certificate)  # type: ignore[arg-type]
    app.add_exception_handler(InvalidObjectIdError, _invalid_object_id)  # type: ignore[arg-type]
    app.add_exception_handler(CertificateNotFoundError, _not_found)  # type: ignore[arg-type]
    app.add_exception_handler(StoreError, _store_error)  # type: ignore[arg-type]
