"""
Cache infrastructure.
"""

from etherstake.infrastructure.cache.i_cache_client import ICacheClient
from etherstake.infrastructure.cache.redis_cache_client import RedisCacheClient

__all__ = [
    "ICacheClient",
    "RedisCacheClient",
]
