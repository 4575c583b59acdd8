"""HTTP endpoints for certificate templates.

    GET  /api/certificates            list, optional ?name= substring filter
    GET  /api/certificates/default    the built-in starter template
    POST /api/certificates/save       create (no id) or update (with id)
    GET  /api/certificates/load?id=   one certificate by hex ObjectId
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from certificate_maker.db.integration import RepositoryDep

from .defaults import default_certificate
from .models import Certificate, parse_object_id
from .service import save_certificate

router = APIRouter(prefix="/api/certificates", tags=["Certificates"])


@router.get("", response_model=list[Certificate], response_model_exclude_none=True)
async def list_certificates(
    repo: RepositoryDep,
    name: Optional[str] = Query(default=None, description="Case-insensitive substring of the name"),
) -> list[Certificate]:
    """Stored certificates, most recently updated first."""
    return await repo.list(name=name)


@router.get("/default", response_model=Certificate, response_model_exclude_none=True)
async def get_default_certificate() -> Certificate:
    return default_certificate()


@router.post("/save", response_model=Certificate, response_model_exclude_none=True)
async def save_certificate_endpoint(certificate: Certificate, repo: RepositoryDep) -> Certificate:
    """Insert when ``id`` is empty, otherwise replace name, bgImage and elements.

    Example:
        ```bash
        curl -X POST http://localhost:8080/api/certificates/save \\
          -H "Content-Type: application/json" \\
          -d '{"name": "Workshop", "bgImage": "", "elements": []}'
        ```
    """
    return await save_certificate(repo, certificate)


@router.get("/load", response_model=Certificate, response_model_exclude_none=True)
async def load_certificate(
    repo: RepositoryDep,
    id: Optional[str] = Query(default=None, description="Hex ObjectId of the certificate"),
) -> Certificate:
    if not id:
        raise HTTPException(status_code=400, detail="ID parameter is required")
    return await repo.get(parse_object_id(id))
