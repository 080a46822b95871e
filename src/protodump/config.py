"""config.py – Options for a single extraction run.

There is no configuration file and no environment lookup; the CLI builds an
:class:`ExtractOptions` from its flags and passes it down.

Usage::

    from protodump.config import ExtractOptions

    opts = ExtractOptions(debug=True)
    opts.internal_linkage       # "static"
"""

from dataclasses import dataclass
from pathlib import Path

from protodump.visibility import INTERNAL_LINKAGE


@dataclass
class ExtractOptions:
    """Settings that control how prototypes are extracted."""

    debug: bool = False
    internal_linkage: str = INTERNAL_LINKAGE
    encoding: str = "utf-8"
    # Additional tree-sitter patterns compiled after the built-in ones.
    extra_query: str = ""

    @classmethod
    def with_query_file(cls, query_path: Path | None, **kwargs) -> "ExtractOptions":
        """Build options, reading extra patterns from *query_path* if given."""
        extra = query_path.read_text(encoding="utf-8") if query_path is not None else ""
        return cls(extra_query=extra, **kwargs)
