"""Tests for CacheService with a mocked Redis client."""

import json
from unittest.mock import AsyncMock

import pytest
import redis.asyncio as redis

from goldworks.infrastructure.cache.redis_cache import CacheService


@pytest.fixture
def redis_client() -> AsyncMock:
    return AsyncMock()


async def test_get_decodes_json(redis_client) -> None:
    redis_client.get.return_value = json.dumps({"PRINT": True})
    cache = CacheService(redis_client=redis_client)
    assert await cache.get("flags") == {"PRINT": True}
    redis_client.get.assert_awaited_once_with("flags")


async def test_get_miss_returns_none(redis_client) -> None:
    redis_client.get.return_value = None
    assert await CacheService(redis_client=redis_client).get("flags") is None


async def test_set_without_ttl_uses_plain_set(redis_client) -> None:
    cache = CacheService(redis_client=redis_client)
    assert await cache.set("flags", {"CAD": False}, ttl=None)
    redis_client.set.assert_awaited_once_with("flags", json.dumps({"CAD": False}))
    redis_client.setex.assert_not_awaited()


async def test_set_with_ttl_uses_setex(redis_client) -> None:
    cache = CacheService(redis_client=redis_client)
    assert await cache.set("k", [1, 2], ttl=60)
    redis_client.setex.assert_awaited_once_with("k", 60, "[1, 2]")


async def test_redis_error_is_reported_as_failure(redis_client) -> None:
    redis_client.delete.side_effect = redis.RedisError("boom")
    cache = CacheService(redis_client=redis_client)
    assert await cache.delete("k") is False


async def test_unavailable_cache_is_a_no_op() -> None:
    cache = CacheService()
    assert not cache.is_available()
    assert await cache.get("k") is None
    assert await cache.set("k", 1) is False
    assert await cache.delete("k") is False
