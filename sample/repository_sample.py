# sample/repository_sample.py
# Stores a JSON-encoded row under "table:id" and reads it back.
# Needs a Redis server on localhost:6379.

import json
import logging

from dbcache.config import CACHE_TTL_SECONDS
from dbcache.services.repository import Repository

logging.basicConfig(level=logging.INFO)

repository = Repository({"host": "localhost", "port": 6379}, {"decode_responses": True})

data = {
    "name": "gabriel",
    "email": "testegabs@teste.com",
}
repository.set("table:id", json.dumps(data), CACHE_TTL_SECONDS)

print(repository.get("table:id"))
print(repository.get(repository.build_identifier({"table": "users", "id": 1})))
