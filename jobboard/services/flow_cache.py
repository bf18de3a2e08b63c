# jobboard/services/flow_cache.py
import hashlib
import json
import logging
from typing import Any, Optional

import redis.asyncio as aioredis

from jobboard.core.config import settings

logger = logging.getLogger(__name__)


def cache_key(stage_name: str, payload: dict) -> str:
    blob = json.dumps(
        {"stage": stage_name, "prompt": payload.get("prompt"), "media": payload.get("media") or []},
        sort_keys=True,
    )
    return f"flow:{stage_name}:{hashlib.sha256(blob.encode('utf-8')).hexdigest()}"


class FlowCache:
    """Redis cache of flow outputs. Failures are logged and treated as a miss."""

    def __init__(self, url: Optional[str] = None):
        self._url = url or settings.REDIS_URL
        self._client = None

    @property
    def enabled(self) -> bool:
        return settings.AI_CACHE_ENABLED

    async def _get_client(self):
        if self._client is None:
            self._client = aioredis.from_url(self._url, decode_responses=True)
        return self._client

    async def get(self, key: str) -> Optional[Any]:
        if not self.enabled:
            return None
        try:
            client = await self._get_client()
            val = await client.get(key)
        except aioredis.RedisError as exc:
            logger.debug("flow cache get failed for %s: %s", key, exc)
            return None
        if val is None:
            return None
        return json.loads(val)

    async def set(self, key: str, value: Any, ttl: Optional[int] = None):
        if not self.enabled:
            return
        try:
            client = await self._get_client()
            await client.set(key, json.dumps(value), ex=ttl or settings.AI_CACHE_TTL_SEC)
        except aioredis.RedisError as exc:
            logger.debug("flow cache set failed for %s: %s", key, exc)

    async def close(self):
        if self._client is not None:
            await self._client.aclose()
            self._client = None


cache = FlowCache()
