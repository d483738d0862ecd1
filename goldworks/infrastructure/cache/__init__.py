"""Cache: Redis service used by the department flag store."""

from goldworks.infrastructure.cache.redis_cache import CacheService

__all__ = ["CacheService"]
