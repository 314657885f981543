"""Data models for the object the visitor is currently viewing."""

from dataclasses import dataclass


@dataclass(frozen=True)
class QueriedPost:
    """A single content entity (post, page, custom post type entry)."""

    id: int
    post_type: str = "post"


@dataclass(frozen=True)
class QueriedPostTypeArchive:
    """The archive listing of a post type."""

    name: str  # post type slug


@dataclass(frozen=True)
class QueriedTerm:
    """A taxonomy term archive."""

    term_id: int
    taxonomy: str


QueriedObject = QueriedPost | QueriedPostTypeArchive | QueriedTerm
