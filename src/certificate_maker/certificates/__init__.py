"""Certificate templates: models, the default template, and save/seed logic.

The HTTP endpoints live in :mod:`certificate_maker.certificates.router`.
"""

from .defaults import DEFAULT_CERTIFICATE_NAME, default_certificate
from .models import Certificate, CertificateElement, parse_object_id, utcnow

__all__ = [
    "Certificate",
    "CertificateElement",
    "DEFAULT_CERTIFICATE_NAME",
    "default_certificate",
    "parse_object_id",
    "utcnow",
]
