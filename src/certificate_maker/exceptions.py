from __future__ import annotations


class CertificateMakerError(Exception):
    """Base exception for certificate-maker."""


class StoreError(CertificateMakerError):
    """The document store failed, timed out, or could not be reached."""


class CertificateNotFoundError(CertificateMakerError):
    def __init__(self, certificate_id: str):
        super().__init__(f"Certificate {certificate_id} not found")
        self.certificate_id = certificate_id


class InvalidObjectIdError(CertificateMakerError, ValueError):
    """A value is not a valid 24-character hex ObjectId."""


class InvalidCertificateError(CertificateMakerError, ValueError):
    """A certificate payload failed a business rule (e.g. missing name)."""
