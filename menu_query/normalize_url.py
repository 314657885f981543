"""Logic for normalizing menu URLs."""

import re
from urllib.parse import quote, urljoin, urlsplit

ABSOLUTE_URL_RE = re.compile(r"^https?://", re.IGNORECASE)
ALLOWED_SCHEMES = {"http", "https", "mailto", "tel", "ftp", "ftps", "news", "irc"}

# Characters left untouched when escaping (reserved + already-escaped).
SAFE_CHARS = "/:?#[]@!$&'()*+,;=%~-._"


def normalize_url(url: str) -> str:
    """Escape a URL for storage and comparison.

    Strips whitespace, percent-encodes unsafe characters and drops URLs
    whose scheme is not allowed (e.g. ``javascript:``).
    """
    url = (url or "").strip()
    if not url:
        return ""

    scheme = urlsplit(url).scheme.lower()
    if scheme and scheme not in ALLOWED_SCHEMES:
        return ""

    return quote(url.replace(" ", "%20"), safe=SAFE_CHARS)


def is_absolute_url(url: str) -> bool:
    """Check if the URL starts with http:// or https://."""
    return bool(ABSOLUTE_URL_RE.match(url))


def home_url(home: str, path: str = "") -> str:
    """Build a URL relative to the home URL."""
    base = home.rstrip("/") + "/"
    return urljoin(base, path.lstrip("/"))


def absolute_url(url: str, home: str) -> str:
    """Resolve a relative URL against the home URL.

    Absolute URLs, other schemes (mailto:, tel:), bare fragments and empty
    strings are returned unchanged.
    """
    if not url or url.startswith("#") or urlsplit(url).scheme:
        return url
    if url.startswith("//"):
        return urljoin(home, url)
    return home_url(home, url)


def trailingslashit(url: str) -> str:
    """Ensure a URL ends with exactly one slash."""
    return url.rstrip("/") + "/"


def filter_url(url: str, home: str) -> str:
    """Make a relative URL absolute against the home URL.

    Absolute http(s) URLs are returned unchanged; anything else is joined
    to the home URL and given a trailing slash.
    """
    if is_absolute_url(url):
        return url
    return trailingslashit(home_url(home, url))
