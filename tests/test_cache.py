from unittest.mock import MagicMock, patch

import pytest
import redis

from learning_portal.config import settings
from learning_portal.domain.entities import Course
from learning_portal.infrastructure.cache import (
    get_cache, set_cache, delete_cache, CourseCatalogCache, CATALOG_KEY,
)


@pytest.fixture(autouse=True)
def cache_enabled(monkeypatch):
    monkeypatch.setattr(settings, "CACHE_ENABLED", True)


@patch('learning_portal.infrastructure.cache.get_redis')
def test_get_cache_hit(mock_redis):
    """Тест получения значения из кэша (hit)"""
    mock_client = MagicMock()
    mock_client.get.return_value = '{"key": "value"}'
    mock_redis.return_value = mock_client

    result = get_cache("test_key")
    assert result == {"key": "value"}
    mock_client.get.assert_called_once_with("test_key")


@patch('learning_portal.infrastructure.cache.get_redis')
def test_get_cache_miss(mock_redis):
    """Тест получения значения из кэша (miss)"""
    mock_client = MagicMock()
    mock_client.get.return_value = None
    mock_redis.return_value = mock_client

    assert get_cache("test_key") is None


@patch('learning_portal.infrastructure.cache.get_redis')
def test_get_cache_error(mock_redis):
    """Тест обработки ошибки при получении из кэша"""
    mock_redis.side_effect = redis.ConnectionError("Redis error")
    assert get_cache("test_key") is None


@patch('learning_portal.infrastructure.cache.get_redis')
def test_get_cache_disabled(mock_redis, monkeypatch):
    monkeypatch.setattr(settings, "CACHE_ENABLED", False)
    assert get_cache("test_key") is None
    mock_redis.assert_not_called()


@patch('learning_portal.infrastructure.cache.get_redis')
def test_set_cache(mock_redis):
    """Тест сохранения значения в кэш"""
    mock_client = MagicMock()
    mock_redis.return_value = mock_client

    assert set_cache("test_key", {"key": "value"}, ttl=300) is True
    mock_client.setex.assert_called_once_with("test_key", 300, '{"key": "value"}')


@patch('learning_portal.infrastructure.cache.get_redis')
def test_set_cache_error(mock_redis):
    """Тест обработки ошибки при сохранении в кэш"""
    mock_redis.side_effect = redis.ConnectionError("Redis error")
    assert set_cache("test_key", {"key": "value"}) is False


@patch('learning_portal.infrastructure.cache.get_redis')
def test_delete_cache(mock_redis):
    """Тест удаления значения из кэша"""
    mock_client = MagicMock()
    mock_redis.return_value = mock_client

    assert delete_cache("test_key") is True
    mock_client.delete.assert_called_once_with("test_key")


@patch('learning_portal.infrastructure.cache.get_redis')
def test_catalog_cache_round_trip(mock_redis):
    """Каталог сохраняется списком словарей и читается обратно в Course"""
    store = {}
    mock_client = MagicMock()
    mock_client.setex.side_effect = lambda key, ttl, value: store.__setitem__(key, value)
    mock_client.get.side_effect = store.get
    mock_redis.return_value = mock_client

    cache = CourseCatalogCache()
    assert cache.get() is None

    courses = [Course(id="c1", name="Python", slug="python", icon="Code")]
    cache.put(courses)
    assert CATALOG_KEY in store
    assert cache.get() == courses


@patch('learning_portal.infrastructure.cache.get_redis')
def test_catalog_cache_ignores_foreign_payload(mock_redis):
    mock_client = MagicMock()
    mock_client.get.return_value = '[{"title": "not a course"}]'
    mock_redis.return_value = mock_client

    assert CourseCatalogCache().get() is None
