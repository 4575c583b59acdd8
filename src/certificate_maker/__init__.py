from .exceptions import (
    CertificateMakerError,
    CertificateNotFoundError,
    InvalidCertificateError,
    InvalidObjectIdError,
    StoreError,
)

__version__ = "0.1.0"

__all__ = [
    "CertificateMakerError",
    "CertificateNotFoundError",
    "InvalidCertificateError",
    "InvalidObjectIdError",
    "StoreError",
    "__version__",
]
