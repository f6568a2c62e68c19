# dbcache/config.py
import os
from typing import Any, Dict

# Fixed connection defaults; a caller's partial config is merged over these.
DEFAULT_CONFIG: Dict[str, Any] = {
    "scheme": "tcp",
    "host": "localhost",
    "port": 6379,
}

# Environment overrides for the process-wide repository (see get_repository).
#   CACHE_SCHEME: "tcp" | "tls" | "unix"
#   CACHE_PATH: socket path (unix scheme only)
#   CACHE_DB: logical database index
CACHE_SCHEME = os.getenv("CACHE_SCHEME")
CACHE_HOST = os.getenv("CACHE_HOST")
CACHE_PORT = os.getenv("CACHE_PORT")
CACHE_PATH = os.getenv("CACHE_PATH")
CACHE_PASSWORD = os.getenv("CACHE_PASSWORD")
CACHE_DB = os.getenv("CACHE_DB")

CACHE_DECODE_RESPONSES = os.getenv("CACHE_DECODE_RESPONSES", "true").lower() == "true"
CACHE_TTL_SECONDS = int(os.getenv("CACHE_TTL_SECONDS", "0"))  # 0 = no TTL

# Only keys that were actually set, so unset ones keep DEFAULT_CONFIG values.
CACHE_CONFIG: Dict[str, Any] = {
    key: value
    for key, value in {
        "scheme": CACHE_SCHEME,
        "host": CACHE_HOST,
        "port": int(CACHE_PORT) if CACHE_PORT else None,
        "path": CACHE_PATH,
        "password": CACHE_PASSWORD,
        "db": int(CACHE_DB) if CACHE_DB else None,
    }.items()
    if value is not None
}

CACHE_OPTIONS: Dict[str, Any] = {"decode_responses": CACHE_DECODE_RESPONSES}
