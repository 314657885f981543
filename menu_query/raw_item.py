"""Data models for representing raw menu item records from the store."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from menu_query.as_text import as_text


@dataclass(frozen=True)
class RawItem:
    """Represents a menu item record exactly as the store returns it."""

    id: int
    parent_id: int  # 0 for top-level items
    type: str  # post_type/post_type_archive/taxonomy/custom
    object: str
    object_id: Any  # post id, term id or empty, depending on type
    url: str
    title: str = ""
    type_label: str = ""
    target: str = ""
    classes: tuple[str, ...] = ()
    description: str = ""
    meta: Mapping[str, Any] = field(default_factory=dict)


def _as_int(v: object) -> int:
    try:
        return int(str(v).strip())
    except ValueError:
        return 0


def raw_item_from_dict(data: Mapping[str, Any]) -> RawItem:
    """Build a RawItem from a mapping, accepting the host's field names."""
    item_id = data.get("id", data.get("ID", 0))
    parent = data.get("parent_id", data.get("menu_item_parent", 0))
    classes = data.get("classes") or []
    if isinstance(classes, str):
        classes = classes.split()

    return RawItem(
        id=_as_int(item_id),
        parent_id=_as_int(parent or 0),
        type=as_text(data.get("type")),
        object=as_text(data.get("object")),
        object_id=data.get("object_id", ""),
        url=as_text(data.get("url")),
        title=as_text(data.get("title")),
        type_label=as_text(data.get("type_label")),
        target=as_text(data.get("target")),
        classes=tuple(str(c) for c in classes if c),
        description=as_text(data.get("description")),
        meta=dict(data.get("meta") or {}),
    )
