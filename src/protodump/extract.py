"""extract.py – Walk tree-sitter matches and yield prototype lines.

Parses the source once, compiles the function query once, then consumes
matches in the order the query cursor delivers them.  Each match is resolved,
filtered for visibility, and rendered before the next one is requested.
"""

from collections.abc import Iterator

from tree_sitter import Parser, QueryCursor

from protodump.config import ExtractOptions
from protodump.resolver import (
    ResolvedRecord,
    UnclassifiedHandler,
    captures_from_match,
    resolve_match,
)
from protodump.roles import C_LANGUAGE, RoleRegistry
from protodump.signature import render_signature
from protodump.source import SourceBuffer
from protodump.visibility import is_externally_visible


def iter_records(
    source: SourceBuffer,
    registry: RoleRegistry,
    on_unclassified: UnclassifiedHandler | None = None,
) -> Iterator[ResolvedRecord]:
    """Yield one resolved record per query match, unfiltered."""
    parser = Parser(C_LANGUAGE)
    tree = parser.parse(source.data)
    cursor = QueryCursor(registry.query)
    for _pattern_index, captures_by_name in cursor.matches(tree.root_node):
        captures = captures_from_match(registry, captures_by_name)
        yield resolve_match(registry, captures, on_unclassified)


def extract_prototypes(
    source: SourceBuffer,
    options: ExtractOptions | None = None,
    registry: RoleRegistry | None = None,
    on_unclassified: UnclassifiedHandler | None = None,
) -> Iterator[str]:
    """Yield ``signature;`` strings for every externally visible definition.

    *on_unclassified* only receives captures when ``options.debug`` is set.

    Raises:
        RuntimeError: If the query (including ``options.extra_query``) fails
            to compile.
    """
    opts = options or ExtractOptions()
    if registry is None:
        registry = RoleRegistry.compile(C_LANGUAGE, extra=opts.extra_query)
    handler = on_unclassified if opts.debug else None

    for record in iter_records(source, registry, handler):
        if is_externally_visible(record, source, keyword=opts.internal_linkage):
            yield render_signature(record, source)
