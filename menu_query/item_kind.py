"""Menu item kinds as the store reports them."""

POST_TYPE = "post_type"
POST_TYPE_ARCHIVE = "post_type_archive"
TAXONOMY = "taxonomy"
CUSTOM = "custom"

KNOWN_KINDS = frozenset({POST_TYPE, POST_TYPE_ARCHIVE, TAXONOMY, CUSTOM})


def is_known_kind(kind: str) -> bool:
    """Check if the kind is one of the four kinds the classifier understands."""
    return kind in KNOWN_KINDS
