"""visibility.py – Decide whether a resolved definition has external linkage."""

from protodump.resolver import ResolvedRecord
from protodump.source import SourceBuffer

INTERNAL_LINKAGE = "static"


def is_externally_visible(
    record: ResolvedRecord, source: SourceBuffer, keyword: str = INTERNAL_LINKAGE
) -> bool:
    """Return True if *record* should be emitted as a prototype.

    Incomplete records (no definition or no body) are never visible.  A
    definition is hidden when its storage-class specifier text contains
    *keyword*.  This is a substring test on the specifier span, not a token
    comparison.
    """
    if not record.is_complete:
        return False
    if record.storage_class is None:
        return True
    return keyword not in source.node_text(record.storage_class)
