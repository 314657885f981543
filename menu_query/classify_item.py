"""Logic for turning raw menu records into queryable menu items."""

import logging

from menu_query import item_kind
from menu_query.hooks import ITEM_IS_CURRENT, MenuQueryHooks
from menu_query.item_kind import is_known_kind
from menu_query.is_queried_object import is_queried_object
from menu_query.menu_item import MenuItem
from menu_query.page_context import PageContext
from menu_query.raw_item import RawItem

logger = logging.getLogger(__name__)


def resolve_object_id(raw: RawItem) -> object:
    """Return the identity value an item of this kind is matched by."""
    if raw.type == item_kind.POST_TYPE_ARCHIVE:
        return raw.object
    if raw.type == item_kind.CUSTOM:
        return raw.url
    return raw.object_id


def classify_item(
    raw: RawItem,
    context: PageContext,
    hooks: MenuQueryHooks | None = None,
) -> MenuItem:
    """Classify a raw record and compute its current-page flag.

    Unknown kinds pass through with their object id untouched; they can
    only become current through the URL fallback or a filter.
    """
    if not is_known_kind(raw.type):
        logger.debug("Menu item %s has unknown type %r", raw.id, raw.type)

    item = MenuItem(
        id=raw.id,
        parent_id=raw.parent_id,
        kind=raw.type,
        object=raw.object,
        object_id=resolve_object_id(raw),
        url=context.normalize_url(raw.url),
        title=raw.title,
        type_label=raw.type_label,
        target=raw.target,
        description=raw.description,
        classes=list(raw.classes),
        meta=dict(raw.meta),
    )

    current = is_queried_object(item, context)
    if hooks is not None:
        current = hooks.apply_filters(ITEM_IS_CURRENT, current, item)
    item.set_current(current)
    return item
