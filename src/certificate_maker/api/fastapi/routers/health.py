from __future__ import annotations

from fastapi import APIRouter
from starlette.responses import JSONResponse

from certificate_maker.db.health import mongo_healthcheck
from certificate_maker.db.integration import StoreDep

router = APIRouter(tags=["internal"])
INCLUDE_ROUTER_IN_SCHEMA = False


@router.get("/_store/health")
async def store_health(store: StoreDep) -> JSONResponse:
    ok = await mongo_healthcheck(store)
    return JSONResponse(
        status_code=200 if ok else 503,
        content={"status": "ok" if ok else "unavailable"},
    )
