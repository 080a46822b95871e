"""source.py – The immutable source buffer every syntax node points into.

The input is read once and decoded once with a strict decode, so every
later span slice is known to be valid text.  tree-sitter works on UTF-8
bytes, so input in any other encoding is re-encoded before parsing and all
node offsets refer to that UTF-8 form.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from tree_sitter import Node


@dataclass(frozen=True)
class SourceBuffer:
    """UTF-8 bytes handed to the parser and the text they decode to."""

    data: bytes
    text: str
    encoding: str = "utf-8"  # encoding of the original input

    @classmethod
    def from_bytes(cls, raw: bytes, encoding: str = "utf-8") -> "SourceBuffer":
        """Validate *raw* as *encoding* text.

        Raises:
            ValueError: If the bytes are not valid in *encoding*, or the
                encoding is unknown.
        """
        try:
            text = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise ValueError(
                f"Input is not valid {encoding} text (byte {exc.start}): {exc.reason}"
            ) from exc
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: {encoding}") from exc
        return cls(data=text.encode("utf-8"), text=text, encoding=encoding)

    @classmethod
    def from_path(cls, path: Path, encoding: str = "utf-8") -> "SourceBuffer":
        return cls.from_bytes(path.read_bytes(), encoding=encoding)

    @classmethod
    def from_stream(cls, stream: BinaryIO | None = None, encoding: str = "utf-8") -> "SourceBuffer":
        """Read the whole of *stream* (default: stdin) in one blocking read."""
        if stream is None:
            stream = sys.stdin.buffer
        return cls.from_bytes(stream.read(), encoding=encoding)

    def span(self, start: int, end: int) -> str:
        """Return the text of the byte range ``[start, end)``."""
        return self.data[start:end].decode("utf-8")

    def node_text(self, node: Node) -> str:
        return self.span(node.start_byte, node.end_byte)
