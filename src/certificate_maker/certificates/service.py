from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from certificate_maker.exceptions import InvalidCertificateError

from .defaults import default_certificate
from .models import Certificate, utcnow

if TYPE_CHECKING:
    from certificate_maker.db.repository import CertificateRepository
    from certificate_maker.db.store import MongoStore

logger = logging.getLogger(__name__)


def validate_certificate(certificate: Certificate) -> None:
    if not certificate.name:
        raise InvalidCertificateError("Certificate name is required")


async def save_certificate(repo: "CertificateRepository", certificate: Certificate) -> Certificate:
    """Create when ``certificate.id`` is unset, otherwise update in place.

    ``updated_at`` is always stamped here; ``created_at`` only on create.
    """
    validate_certificate(certificate)
    now = utcnow()

    if certificate.id is None:
        saved = await repo.insert(certificate.model_copy(update={"created_at": now, "updated_at": now}))
        logger.info("Created certificate %s (%r)", saved.id, saved.name, extra={"certificate_id": saved.id})
        return saved

    saved = await repo.update(certificate.model_copy(update={"updated_at": now}))
    logger.info("Updated certificate %s (%r)", saved.id, saved.name, extra={"certificate_id": saved.id})
    return saved


async def seed_default_certificate(repo: "CertificateRepository") -> Optional[Certificate]:
    """Insert the default template when the collection is empty."""
    count = await repo.count()
    if count:
        logger.debug("Skipping seed, %d certificate(s) already stored", count)
        return None
    logger.info("No certificates found, inserting default certificate")
    seeded = await repo.insert(default_certificate())
    logger.info("Default certificate inserted (%s)", seeded.id, extra={"certificate_id": seeded.id})
    return seeded


async def bootstrap_store(store: "MongoStore") -> Optional[Certificate]:
    """Startup precondition: ping, index on ``name``, seed if empty.

    Any failure propagates; the process must not start half-initialized.
    """
    await store.ping()
    repo = store.certificates()
    index_name = await repo.ensure_indexes()
    logger.debug("Ensured index %s on %s", index_name, store.settings.collection)
    return await seed_default_certificate(repo)
