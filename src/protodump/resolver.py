"""resolver.py – Fold one query match into a record of semantic roles.

tree-sitter reports a match as ``{capture_name: [node, ...]}``.  The
resolver flattens that into ``(capture_index, node)`` pairs and folds them
into a :class:`ResolvedRecord`, one optional node per :class:`Role`.  When a
role is captured more than once in a match the last capture wins.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass

from tree_sitter import Node

from protodump.roles import Role, RoleRegistry

Capture = tuple[int, Node]

# Called with (capture_name, node) for captures that map to no role.
UnclassifiedHandler = Callable[[str, Node], None]

_FIELD_FOR_ROLE: dict[Role, str] = {
    Role.DEFINITION: "definition",
    Role.BODY: "body",
    Role.STORAGE_CLASS: "storage_class",
    Role.NAME: "name",
}


@dataclass(frozen=True)
class ResolvedRecord:
    """The nodes bound to each role in a single match."""

    definition: Node | None = None
    body: Node | None = None
    storage_class: Node | None = None
    name: Node | None = None

    @property
    def is_complete(self) -> bool:
        """True when both the definition and its body were captured."""
        return self.definition is not None and self.body is not None


def captures_from_match(
    registry: RoleRegistry, captures_by_name: Mapping[str, Sequence[Node]]
) -> list[Capture]:
    """Flatten a py-tree-sitter match dict into ``(index, node)`` pairs."""
    captures: list[Capture] = []
    for name, nodes in captures_by_name.items():
        index = registry.index_for_name(name)
        for node in nodes:
            captures.append((index, node))
    return captures


def resolve_match(
    registry: RoleRegistry,
    captures: Iterable[Capture],
    on_unclassified: UnclassifiedHandler | None = None,
) -> ResolvedRecord:
    """Bind each capture to its role; forward the rest to *on_unclassified*."""
    fields: dict[str, Node] = {}
    for index, node in captures:
        role = registry.role_for(index)
        if role is None:
            if on_unclassified is not None:
                on_unclassified(registry.capture_name(index), node)
            continue
        fields[_FIELD_FOR_ROLE[role]] = node
    return ResolvedRecord(**fields)
