"""The page being viewed and the URL primitives queries depend on."""

from dataclasses import dataclass

from menu_query.normalize_url import (
    absolute_url,
    filter_url,
    home_url,
    normalize_url,
)
from menu_query.queried_object import QueriedObject


@dataclass
class PageContext:
    """Describes the request a menu is being queried for.

    Subclass and override the methods to plug in a host's own URL
    handling; the defaults work from the stored values.
    """

    home: str = "http://localhost/"
    current_url: str = ""
    queried: QueriedObject | None = None

    def home_url(self, path: str = "") -> str:
        """Return a URL relative to the site home."""
        return home_url(self.home, path)

    def current_page_url(self) -> str:
        """Return the normalized URL of the page being viewed."""
        return self.normalize_url(self.current_url)

    def queried_object(self) -> QueriedObject | None:
        """Return the object being viewed, if any."""
        return self.queried

    def normalize_url(self, url: str) -> str:
        """Escape a URL and make it absolute against the home URL."""
        return absolute_url(normalize_url(url), self.home)

    def filter_url(self, url: str) -> str:
        """Make a caller-supplied URL absolute against the home URL."""
        return normalize_url(filter_url(url, self.home))
