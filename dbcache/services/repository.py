# dbcache/services/repository.py
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

import redis

from dbcache.config import DEFAULT_CONFIG
from dbcache.services.identifiers import Collection, build_identifier

logger = logging.getLogger(__name__)

TLS_SCHEMES = ("tls", "rediss")
UNIX_SCHEMES = ("unix",)


def client_kwargs(config: Mapping[str, Any], options: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Translate a merged connection config plus pass-through options into
    keyword arguments for the client constructor.

    "scheme" is consumed here; every other config key is forwarded as-is.
    Options are applied last and win on collisions.
    """
    kwargs = {k: v for k, v in config.items() if k != "scheme"}
    scheme = str(config.get("scheme", "tcp")).lower()

    if scheme in UNIX_SCHEMES:
        if not kwargs.get("path"):
            raise ValueError('unix scheme requires a socket "path"')
        kwargs.pop("host", None)
        kwargs.pop("port", None)
        kwargs["unix_socket_path"] = kwargs.pop("path")
    elif scheme in TLS_SCHEMES:
        kwargs["ssl"] = True

    kwargs.update(options)
    return kwargs


class Repository:
    """
    Best-effort cache in front of database query results.

    Holds at most one client handle, created lazily on first use and reused for
    the lifetime of the instance. get/set/delete never raise: any backend
    failure is logged and degraded to None / False, so a cache outage cannot
    abort the caller's primary workflow.
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        options: Optional[Mapping[str, Any]] = None,
        client_factory: Callable[..., Any] = redis.Redis,
    ) -> None:
        self._config = MappingProxyType(self.merged_config(config or {}))
        self._options = MappingProxyType(dict(options or {}))
        self._client_factory = client_factory
        # Not guarded by a lock: concurrent first use may build two handles.
        self.redis: Optional[Any] = None

    @property
    def config(self) -> Mapping[str, Any]:
        return self._config

    @property
    def options(self) -> Mapping[str, Any]:
        return self._options

    # ---------- queries ----------

    def get(self, identifier: str) -> Optional[str]:
        """Return the cached value, or None on a miss or any backend failure."""
        try:
            value = self.connection().get(identifier)
            if isinstance(value, bytes):
                value = value.decode("utf-8")
            return value
        except Exception:
            logger.warning("cache get failed for %r", identifier, exc_info=True)
            return None

    def set(self, identifier: str, value: str, ttl_seconds: int = 0) -> bool:
        """
        Store value under identifier; a nonzero ttl_seconds stores it with that expiry
        (SETEX), zero stores it without one (SET). Returns False on any failure.
        """
        try:
            client = self.connection()
            if ttl_seconds:
                client.setex(identifier, ttl_seconds, value)
            else:
                client.set(identifier, value)
            return True
        except Exception:
            logger.warning("cache set failed for %r (ttl=%s)", identifier, ttl_seconds, exc_info=True)
            return False

    def delete(self, identifier: str) -> bool:
        # Deleting a missing key is not an error for the backend.
        try:
            self.connection().delete(identifier)
            return True
        except Exception:
            logger.warning("cache delete failed for %r", identifier, exc_info=True)
            return False

    def build_identifier(self, collection: Collection) -> str:
        return build_identifier(collection)

    # ---------- connection ----------

    def connection(self) -> Any:
        """Return the existing handle as-is, creating it on first use."""
        if self.redis is not None:
            return self.redis
        return self.connect()

    def connect(self) -> Any:
        kwargs = client_kwargs(self._config, self._options)
        logger.info(
            "Opening cache connection (scheme=%s, host=%s, port=%s)",
            self._config.get("scheme"),
            self._config.get("host"),
            self._config.get("port"),
        )
        self.redis = self._client_factory(**kwargs)
        return self.redis

    @staticmethod
    def merged_config(config: Mapping[str, Any]) -> Dict[str, Any]:
        """Defaults overwritten by every key present in config; no validation."""
        return {**DEFAULT_CONFIG, **config}
