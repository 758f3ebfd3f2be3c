"""Factory functions that wire the pipeline together from settings."""

from __future__ import annotations

import sys
from typing import BinaryIO, Optional, TextIO

from xpathcat.config import Settings, settings
from xpathcat.engine.lxml_engine import LxmlQueryEngine
from xpathcat.engine.pipeline import BatchController
from xpathcat.engine.renderer import ResultRenderer
from xpathcat.sources.reader import ByteSource


def get_query_engine(config: Settings = settings) -> LxmlQueryEngine:
    return LxmlQueryEngine(
        remove_blank_text=config.remove_blank_text,
        huge_tree=config.huge_tree,
    )


def get_byte_source(
    config: Settings = settings,
    stdin: Optional[BinaryIO] = None,
) -> ByteSource:
    return ByteSource(stdin=stdin, chunk_size=config.read_chunk_size)


def get_batch_controller(
    config: Settings = settings,
    sink: Optional[TextIO] = None,
    stdin: Optional[BinaryIO] = None,
) -> BatchController:
    """Build a :class:`BatchController` writing to *sink* (default stdout)."""
    return BatchController(
        engine=get_query_engine(config),
        source=get_byte_source(config, stdin),
        renderer=ResultRenderer(),
        sink=sink if sink is not None else sys.stdout,
    )
