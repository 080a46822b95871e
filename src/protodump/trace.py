"""trace.py – Debug output for captures that map to no known role."""

from __future__ import annotations

import json
from collections.abc import Callable

from tree_sitter import Node

from protodump.source import SourceBuffer


def format_trace_line(capture_name: str, text: str) -> str:
    """Render ``<capture-name>: "<escaped text>"``."""
    return f"{capture_name}: {json.dumps(text, ensure_ascii=False)}"


class DebugTrace:
    """Unclassified-capture handler that writes one line per capture."""

    def __init__(self, source: SourceBuffer, write: Callable[[str], None]) -> None:
        self.source = source
        self.write = write

    def __call__(self, capture_name: str, node: Node) -> None:
        self.write(format_trace_line(capture_name, self.source.node_text(node)))
