"""Shared fixtures: a small site with menus at a few locations."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from menu_query.menu_request import MenuRequest
from menu_query.page_context import PageContext
from menu_query.yaml_menu_source import YamlMenuSource

HOME = "http://example.com/"


def site_data() -> dict[str, Any]:
    """Return a site description with nested items under 'primary'."""
    return {
        "locations": {
            "primary": "Primary Menu",
            "footer": "Footer Menu",
            "sidebar": "Sidebar Menu",
            "broken": "Broken Menu",
        },
        "assignments": {"primary": 2, "footer": 3, "broken": 99},
        "menus": {
            2: {
                "name": "Main",
                "slug": "main",
                "description": "Main navigation",
                "items": [
                    {
                        "id": 10,
                        "parent_id": 0,
                        "type": "post_type",
                        "object": "page",
                        "object_id": 5,
                        "url": "http://example.com/about/",
                        "title": "About",
                        "classes": ["menu-about"],
                        "meta": {"icon": "info"},
                    },
                    {
                        "id": 11,
                        "parent_id": 0,
                        "type": "post_type_archive",
                        "object": "product",
                        "object_id": 0,
                        "url": "http://example.com/products/",
                        "title": "Products",
                    },
                    {
                        "id": 12,
                        "parent_id": 0,
                        "type": "taxonomy",
                        "object": "category",
                        "object_id": 7,
                        "url": "http://example.com/category/news/",
                        "title": "News",
                    },
                    {
                        "id": 13,
                        "parent_id": 0,
                        "type": "custom",
                        "object": "custom",
                        "object_id": 13,
                        "url": "http://example.com/contact/",
                        "title": "Contact",
                        "target": "_blank",
                    },
                    {
                        "id": 14,
                        "parent_id": 0,
                        "type": "post_type",
                        "object": "post",
                        "object_id": 5,
                        "url": "http://example.com/hello-world/",
                        "title": "Hello world",
                    },
                    {
                        "id": 20,
                        "parent_id": 10,
                        "type": "post_type",
                        "object": "page",
                        "object_id": 8,
                        "url": "http://example.com/about/team/",
                        "title": "Team",
                    },
                    {
                        "id": 21,
                        "parent_id": 10,
                        "type": "custom",
                        "object": "custom",
                        "url": "http://example.com/about/history/",
                        "title": "History",
                    },
                    {
                        "id": 22,
                        "parent_id": 10,
                        "type": "custom",
                        "object": "custom",
                        "url": "http://example.com/about/careers/",
                        "title": "Careers",
                    },
                ],
            },
            3: {"name": "Footer", "slug": "footer", "items": []},
        },
    }


@pytest.fixture
def site() -> dict[str, Any]:
    """The fixture site description."""
    return site_data()


@pytest.fixture
def source(site: dict[str, Any]) -> YamlMenuSource:
    """A site store built from the fixture data."""
    return YamlMenuSource(site)


@pytest.fixture
def spy_source(source: YamlMenuSource) -> MagicMock:
    """The site store wrapped so calls can be counted."""
    return MagicMock(wraps=source)


@pytest.fixture
def context() -> PageContext:
    """A page context for the site home with nothing being viewed."""
    return PageContext(home=HOME)


@pytest.fixture
def request_scope(source: YamlMenuSource, context: PageContext) -> MenuRequest:
    """A fresh request against the fixture site."""
    return MenuRequest(source, context)
