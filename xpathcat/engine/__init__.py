"""Query engine, result rendering, and the per-input pipeline.

Public API::

    from xpathcat.engine import (
        BatchController,
        BatchSummary,
        LxmlQueryEngine,
        QueryEngine,
        ResourceScope,
        ResultRenderer,
    )
"""

from xpathcat.engine.base import (
    BooleanResult,
    DocumentTree,
    NodeCollectionResult,
    NodeKind,
    NodeRef,
    NumberResult,
    QueryContext,
    QueryEngine,
    QueryResult,
    StringResult,
)
from xpathcat.engine.lifecycle import ResourceScope
from xpathcat.engine.lxml_engine import LxmlQueryEngine
from xpathcat.engine.pipeline import BatchController, BatchSummary
from xpathcat.engine.renderer import ResultRenderer

__all__ = [
    "BatchController",
    "BatchSummary",
    "BooleanResult",
    "DocumentTree",
    "LxmlQueryEngine",
    "NodeCollectionResult",
    "NodeKind",
    "NodeRef",
    "NumberResult",
    "QueryContext",
    "QueryEngine",
    "QueryResult",
    "ResourceScope",
    "ResultRenderer",
    "StringResult",
]
