"""Single-shot default-namespace neutralization.

Unqualified XPath steps such as ``//item`` never match elements that live in
a default namespace.  Rather than resolving namespaces, the first literal
``xmlns=`` in the raw bytes is turned into ``Xmlns=``, an ordinary attribute,
so the document parses without a default namespace.

Only the first occurrence anywhere in the buffer is touched.  It may sit in
a comment, CDATA or attribute value, and later declarations stay intact.
"""

from __future__ import annotations

from typing import Optional

from xpathcat.sources.reader import DocumentBuffer
from xpathcat.utils.logging import get_logger

logger = get_logger(__name__)

NAMESPACE_TOKEN = b"xmlns="
PLACEHOLDER = ord("X")


def neutralize_namespace(buffer: DocumentBuffer) -> Optional[int]:
    """Overwrite the first byte of the first ``xmlns=`` in place.

    Returns the offset of the rewritten token, or ``None`` when the buffer
    holds no such token.  The buffer length never changes.
    """
    offset = buffer.data.find(NAMESPACE_TOKEN, 0, buffer.length)
    if offset < 0:
        return None

    buffer.data[offset] = PLACEHOLDER
    logger.debug("namespace_neutralized", input=buffer.label, offset=offset)
    return offset
