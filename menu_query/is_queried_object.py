"""Logic for detecting whether a menu item points at the page being viewed."""

from menu_query import item_kind
from menu_query.menu_item import MenuItem
from menu_query.page_context import PageContext
from menu_query.queried_object import (
    QueriedPost,
    QueriedPostTypeArchive,
    QueriedTerm,
)


def _same(a: object, b: object) -> bool:
    # Store ids arrive as ints or numeric strings; compare their text forms.
    return str(a).strip() == str(b).strip()


def is_queried_object(item: MenuItem, context: PageContext) -> bool:
    """Match the item against the queried object, then the current URL."""
    qo = context.queried_object()
    match = False

    if item.kind == item_kind.POST_TYPE:
        if isinstance(qo, QueriedPost):
            match = _same(item.object_id, qo.id)
    elif item.kind == item_kind.POST_TYPE_ARCHIVE:
        if isinstance(qo, QueriedPostTypeArchive):
            match = _same(item.object_id, qo.name)
    elif item.kind == item_kind.TAXONOMY and isinstance(qo, QueriedTerm):
        match = _same(item.object_id, qo.term_id) and item.object == qo.taxonomy

    if not match:
        current_url = context.current_page_url()
        match = bool(current_url) and current_url == item.url

    return match
