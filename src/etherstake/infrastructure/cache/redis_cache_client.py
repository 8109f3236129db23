"""Redis-backed ICacheClient."""

from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from etherstake.infrastructure.cache.i_cache_client import ICacheClient


class RedisCacheClient(ICacheClient):
    """
    Shared cache for API instances.

    Holds the sorted-set windows of the rate limiter. The connection is opened lazily on first use.
    """

    def __init__(
        self,
        host: str = "localhost",
        port: int = 6379,
        db: int = 0,
        password: Optional[str] = None,
        socket_timeout: float = 2.0,
    ):
        """
        Args:
            host: Redis server host
            port: Redis server port
            db: Redis database number (0-15)
            password: Redis password (None if no auth)
            socket_timeout: Seconds before a command or connect attempt fails
        """
        self.host = host
        self.port = port
        self.db = db
        self.password = password or None
        self.socket_timeout = socket_timeout
        self._client: Optional[aioredis.Redis] = None

    async def connect(self) -> None:
        """Create the client (idempotent; sockets open on first command)."""
        if self._client is not None:
            return

        self._client = aioredis.Redis(
            host=self.host,
            port=self.port,
            db=self.db,
            password=self.password,
            socket_timeout=self.socket_timeout,
            socket_connect_timeout=self.socket_timeout,
            decode_responses=True,
        )

    async def disconnect(self) -> None:
        """Close connection to Redis server."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def _redis(self) -> aioredis.Redis:
        if self._client is None:
            await self.connect()
        return self._client

    async def count_since(self, key: str, min_score: float) -> int:
        client = await self._redis()

        # Trim and count in one round trip
        pipe = client.pipeline()
        pipe.zremrangebyscore(key, 0, min_score)
        pipe.zcard(key)
        _, count = await pipe.execute()

        return count

    async def add_scored(
        self,
        key: str,
        member: str,
        score: float,
        expire_seconds: int,
    ) -> None:
        client = await self._redis()

        pipe = client.pipeline()
        pipe.zadd(key, {member: score})
        pipe.expire(key, expire_seconds)
        await pipe.execute()

    async def ping(self) -> bool:
        """True if the server answers PING within the socket timeout."""
        try:
            client = await self._redis()
            await client.ping()
            return True
        except (RedisError, OSError):
            return False
