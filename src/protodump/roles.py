"""roles.py – Capture roles and the compiled tree-sitter query that produces them.

Each :class:`Role` is a semantic slot a function-definition match can fill.
The tree-sitter query assigns its own integer index to every capture name;
:class:`RoleRegistry` compiles the patterns once and translates between
roles, capture names, and those indices.

Usage::

    from protodump.roles import C_LANGUAGE, Role, RoleRegistry

    registry = RoleRegistry.compile(C_LANGUAGE)
    registry.index_for(Role.BODY)       # int, or None if no pattern uses it
"""

from __future__ import annotations

from enum import Enum

import tree_sitter_c
from tree_sitter import Language, Query, QueryError

C_LANGUAGE = Language(tree_sitter_c.language())


class Role(str, Enum):
    """Semantic role of a capture inside a function-definition match."""

    DEFINITION = "definition"
    BODY = "body"
    STORAGE_CLASS = "storage_class"
    NAME = "name"


# Plain ``int f(...) { ... }`` definitions.
VALUE_FUNCTION_PATTERN = """
((function_definition
   . (storage_class_specifier)? @storage_class
   declarator: (function_declarator (identifier) @name)
   body: (_)? @body) @definition)
"""

# ``int *f(...) { ... }``: the function declarator sits under a pointer declarator.
POINTER_FUNCTION_PATTERN = """
((function_definition
   . (storage_class_specifier)? @storage_class
   declarator: (pointer_declarator
     declarator: (function_declarator (identifier) @name))
   body: (_)? @body) @definition)
"""

DEFAULT_PATTERNS = VALUE_FUNCTION_PATTERN + POINTER_FUNCTION_PATTERN


class RoleRegistry:
    """A compiled query plus the role <-> capture-index lookup tables."""

    def __init__(self, query: Query) -> None:
        self.query = query
        self._names: list[str] = [query.capture_name(i) for i in range(query.capture_count)]
        self._index_by_name: dict[str, int] = {name: i for i, name in enumerate(self._names)}
        self._role_by_index: dict[int, Role] = {}
        for role in Role:
            index = self._index_by_name.get(role.value)
            if index is not None:
                self._role_by_index[index] = role

    @classmethod
    def compile(
        cls,
        language: Language = C_LANGUAGE,
        patterns: str = DEFAULT_PATTERNS,
        extra: str = "",
    ) -> RoleRegistry:
        """Compile *patterns* (plus any *extra* patterns) into a registry.

        Raises:
            RuntimeError: If tree-sitter rejects the query source.
        """
        source = patterns + ("\n" + extra if extra.strip() else "")
        try:
            query = Query(language, source)
        except QueryError as exc:
            raise RuntimeError(f"Failed to compile function query: {exc}") from exc
        return cls(query)

    @property
    def capture_names(self) -> list[str]:
        """Capture names in query index order."""
        return list(self._names)

    def index_for(self, role: Role) -> int | None:
        """Return the capture index for *role*, or None if no pattern captures it."""
        return self._index_by_name.get(role.value)

    def index_for_name(self, name: str) -> int:
        """Return the capture index for a capture *name* used in the query."""
        return self._index_by_name[name]

    def role_for(self, index: int) -> Role | None:
        return self._role_by_index.get(index)

    def capture_name(self, index: int) -> str:
        return self._names[index]
