from .health import mongo_healthcheck
from .repository import CertificateRepository, name_filter
from .settings import MongoSettings, get_mongo_settings
from .store import MongoStore

__all__ = [
    "CertificateRepository",
    "MongoSettings",
    "MongoStore",
    "get_mongo_settings",
    "mongo_healthcheck",
    "name_filter",
]
