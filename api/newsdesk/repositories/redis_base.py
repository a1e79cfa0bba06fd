"""Base repository with common Redis patterns."""

import json
from typing import Any, Dict, List, Optional

from redis import Redis

from newsdesk.core.logging import get_logger

logger = get_logger(__name__)


class RedisRepository:
    """Base repository with common Redis operations."""

    def __init__(self, redis_client: Redis):
        self.redis = redis_client

    def get_json(self, key: str) -> Optional[Dict[str, Any]]:
        """Get and parse JSON from Redis key."""
        data = self.redis.get(key)
        if not data:
            return None
        try:
            return json.loads(data)
        except json.JSONDecodeError as e:
            logger.error(f"Error decoding JSON from {key}: {e}")
            return None

    def set_json(self, key: str, value: Dict[str, Any]) -> None:
        """Serialise and store JSON under a Redis key."""
        self.redis.set(key, json.dumps(value, default=str))

    def batch_get_json(self, keys: List[str]) -> Dict[str, Optional[Dict]]:
        """Batch get multiple JSON keys using pipeline."""
        if not keys:
            return {}

        pipeline = self.redis.pipeline()
        for key in keys:
            pipeline.get(key)

        results = pipeline.execute()

        output = {}
        for key, result in zip(keys, results):
            try:
                output[key] = json.loads(result) if result else None
            except json.JSONDecodeError:
                logger.error(f"Error decoding JSON from {key}")
                output[key] = None

        return output
