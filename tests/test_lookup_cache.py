"""Tests for request-scoped caching of menu lookups."""

import copy
import pickle
from unittest.mock import MagicMock

import pytest

from menu_query.lookup_cache import MenuLookupCache
from menu_query.menu_request import MenuRequest
from menu_query.page_context import PageContext


def test_raw_items_fetched_once(spy_source: MagicMock) -> None:
    """Repeated fetches for one menu hit the store once."""
    cache = MenuLookupCache(spy_source)
    first = cache.get_raw_items(2)
    second = cache.get_raw_items(2)

    assert first is second
    assert len(first) == 8
    spy_source.fetch_raw_items.assert_called_once_with(2)


def test_handles_resolved_once(spy_source: MagicMock) -> None:
    """A location is resolved once per cache."""
    cache = MenuLookupCache(spy_source)
    handle = cache.get_menu_handle("primary")

    assert cache.get_menu_handle("primary") is handle
    assert "primary" in cache
    assert spy_source.resolve_location.call_count == 1


def test_queries_share_the_request_cache(spy_source: MagicMock) -> None:
    """Every query in a request reuses the same lookups."""
    request = MenuRequest(spy_source, PageContext(home="http://example.com/"))
    request.query(location="primary")
    request.query(location="primary", parent=10)
    request.menu("primary").get_items(request.context)

    assert spy_source.fetch_raw_items.call_count == 1
    assert spy_source.resolve_location.call_count == 1


def test_new_request_starts_fresh(spy_source: MagicMock) -> None:
    """A new request, or a reset one, fetches again."""
    MenuRequest(spy_source).query(location="primary")
    request = MenuRequest(spy_source)
    request.query(location="primary")
    assert spy_source.fetch_raw_items.call_count == 2

    request.reset()
    request.query(location="primary")
    assert spy_source.fetch_raw_items.call_count == 3


def test_reset_switches_page(spy_source: MagicMock) -> None:
    """Resetting for the next request can move to another page."""
    request = MenuRequest(spy_source)
    context = PageContext(current_url="http://example.com/contact/")
    request.reset(context)

    q = request.query(location="primary")
    assert [item.id for item in q.items if item.is_current()] == [13]


def test_cache_is_not_copyable(spy_source: MagicMock) -> None:
    """A cache cannot be duplicated."""
    cache = MenuLookupCache(spy_source)
    with pytest.raises(TypeError):
        copy.copy(cache)
    with pytest.raises(TypeError):
        copy.deepcopy(cache)
    with pytest.raises(TypeError):
        pickle.dumps(cache)
