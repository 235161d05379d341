import json
from dataclasses import asdict
import redis
from typing import Optional, Any
from ..config import settings
from ..domain.entities import Course
from .metrics import cache_hits_total, cache_misses_total

CATALOG_KEY = "courses:catalog"

_redis_client: Optional[redis.Redis] = None

def get_redis() -> redis.Redis:
    global _redis_client
    if _redis_client is None:
        _redis_client = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
            socket_timeout=5,
            retry_on_timeout=True
        )
    return _redis_client

def get_cache(key: str) -> Optional[Any]:
    """Получить значение из кэша (None при промахе или недоступном Redis)"""
    if not settings.CACHE_ENABLED:
        return None
    try:
        value = get_redis().get(key)
        if value is not None:
            return json.loads(value)
    except (redis.RedisError, ValueError):
        # Если Redis недоступен, просто читаем из БД
        pass
    return None

def set_cache(key: str, value: Any, ttl: int = None) -> bool:
    """Сохранить значение в кэш"""
    if not settings.CACHE_ENABLED:
        return False
    try:
        ttl = ttl or settings.CACHE_TTL
        get_redis().setex(key, ttl, json.dumps(value, ensure_ascii=False))
        return True
    except redis.RedisError:
        return False

def delete_cache(key: str) -> bool:
    """Удалить значение из кэша"""
    if not settings.CACHE_ENABLED:
        return False
    try:
        get_redis().delete(key)
        return True
    except redis.RedisError:
        return False


class CourseCatalogCache:
    """Кэш каталога курсов (курсы приложением не меняются)."""

    def get(self) -> Optional[list[Course]]:
        cached = get_cache(CATALOG_KEY)
        if cached is not None:
            try:
                courses = [Course(**c) for c in cached]
            except TypeError:
                courses = None
            if courses is not None:
                cache_hits_total.inc()
                return courses
        cache_misses_total.inc()
        return None

    def put(self, courses: list[Course]) -> None:
        set_cache(CATALOG_KEY, [asdict(c) for c in courses])
