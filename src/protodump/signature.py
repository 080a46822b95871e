"""signature.py – Rebuild a prototype from the text in front of a function body.

The prototype is the source between the start of the definition and the
start of its body (return type, qualifiers, name, parameter list), trimmed
and terminated with ``;``.  Nothing is re-tokenised.
"""

from protodump.resolver import ResolvedRecord
from protodump.source import SourceBuffer


def signature_span(record: ResolvedRecord) -> tuple[int, int]:
    """Return the byte range ``[definition.start, body.start)``.

    Raises:
        ValueError: If the record lacks a definition or a body.
    """
    if record.definition is None or record.body is None:
        raise ValueError("Record needs both a definition and a body")
    return record.definition.start_byte, record.body.start_byte


def render_signature(record: ResolvedRecord, source: SourceBuffer) -> str:
    start, end = signature_span(record)
    return source.span(start, end).strip() + ";"
