import json
from typing import Any, Optional

import redis.asyncio as redis
from pydantic_core import to_jsonable_python

from vedic_charts.config import Settings, settings


def build_client(config: Settings) -> redis.Redis:
    """
    Redis connection for cached provider responses.

    Responses are stored as JSON text, so replies are decoded to str.
    """
    return redis.Redis(
        host=config.REDIS_HOST,
        port=config.REDIS_PORT,
        db=config.REDIS_DB,
        password=config.REDIS_PASSWORD,
        decode_responses=True,
        socket_timeout=config.REDIS_TIMEOUT,
        socket_connect_timeout=config.REDIS_TIMEOUT,
    )


class RedisClient:
    """
    Process-wide Redis connection and the JSON codec for cached values.
    """

    _client: Optional[redis.Redis] = None

    @classmethod
    def get_client(cls) -> redis.Redis:
        if cls._client is None:
            cls._client = build_client(settings)
        return cls._client

    @staticmethod
    def serialize(value: Any) -> str:
        # Pydantic models, dates and enums are dumped in JSON mode
        return json.dumps(value, default=to_jsonable_python, ensure_ascii=False, separators=(",", ":"))

    @staticmethod
    def deserialize(value: str) -> Any:
        return json.loads(value)
