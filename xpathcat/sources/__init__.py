"""Document byte acquisition and pre-parse rewriting.

Public API::

    from xpathcat.sources import ByteSource, DocumentBuffer, neutralize_namespace
"""

from xpathcat.sources.neutralizer import neutralize_namespace
from xpathcat.sources.reader import ByteSource, DocumentBuffer

__all__ = [
    "ByteSource",
    "DocumentBuffer",
    "neutralize_namespace",
]
