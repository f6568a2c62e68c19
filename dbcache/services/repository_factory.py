# dbcache/services/repository_factory.py
from typing import Optional

from dbcache.config import CACHE_CONFIG, CACHE_OPTIONS
from dbcache.services.repository import Repository

_repository_singleton: Optional[Repository] = None


def get_repository() -> Repository:
    """
    Returns a process-wide Repository configured from the environment
    (CACHE_HOST, CACHE_PORT, ... in dbcache.config).

    The connection itself is still opened lazily, on the first query.
    """
    global _repository_singleton
    if _repository_singleton is None:
        _repository_singleton = Repository(CACHE_CONFIG, CACHE_OPTIONS)
    return _repository_singleton


def reset_repository() -> None:
    """Drop the process-wide instance; the next get_repository() builds a new one."""
    global _repository_singleton
    _repository_singleton = None
