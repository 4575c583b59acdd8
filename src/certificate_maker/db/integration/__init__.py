from .fastapi import RepositoryDep, StoreDep, attach_store, get_repository, get_store

__all__ = ["RepositoryDep", "StoreDep", "attach_store", "get_repository", "get_store"]
