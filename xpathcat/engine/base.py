"""Query engine capability and the tagged result model it produces.

The batch pipeline and renderer depend only on the types defined here.  A
concrete engine (see :mod:`xpathcat.engine.lxml_engine`) parses bytes into a
:class:`DocumentTree`, builds a :class:`QueryContext` over it and evaluates
expressions into one of the four :data:`QueryResult` variants.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


class NodeRef(BaseModel):
    """Non-owning reference to a node inside a :class:`DocumentTree`.

    Attributes:
        kind: Element, text, or anything else (skipped when rendering).
        name: Local element name, empty for non-elements.
        content: Text content for text nodes.
        handle: Engine-specific node object.  Cleared when the owning
            result is detached so it cannot outlive its tree.
    """

    kind: NodeKind
    name: str = ""
    content: str = ""
    handle: Any = Field(default=None, exclude=True, repr=False)


class ResultKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NODE_COLLECTION = "node_collection"


class _BaseResult(BaseModel):
    def detach(self) -> None:
        """Release engine handles held by this result."""


class StringResult(_BaseResult):
    kind: Literal[ResultKind.STRING] = ResultKind.STRING
    value: str


class NumberResult(_BaseResult):
    kind: Literal[ResultKind.NUMBER] = ResultKind.NUMBER
    value: float


class BooleanResult(_BaseResult):
    kind: Literal[ResultKind.BOOLEAN] = ResultKind.BOOLEAN
    value: bool


class NodeCollectionResult(_BaseResult):
    """Ordered node collection.

    ``nodes=None`` (no collection at all) is distinct from ``nodes=[]`` and
    is rendered differently.
    """

    kind: Literal[ResultKind.NODE_COLLECTION] = ResultKind.NODE_COLLECTION
    nodes: Optional[list[NodeRef]]

    def detach(self) -> None:
        for node in self.nodes or []:
            node.handle = None


QueryResult = Union[StringResult, NumberResult, BooleanResult, NodeCollectionResult]


class DocumentTree(ABC):
    """A parsed document owned by one input's processing."""

    def __init__(self, label: str) -> None:
        self.label = label
        self.closed = False

    @abstractmethod
    def children_text(self, node: NodeRef) -> Optional[str]:
        """Return the flattened text of *node*'s direct text children.

        Returns ``None`` when the element has no text children.
        """
        ...

    def close(self) -> None:
        self.closed = True


class QueryContext(ABC):
    """Evaluation context bound to a single :class:`DocumentTree`."""

    def __init__(self, tree: DocumentTree) -> None:
        self.tree = tree
        self.closed = False

    def close(self) -> None:
        self.closed = True


class QueryEngine(ABC):
    """Parse, bind and evaluate -- the three operations the pipeline needs."""

    @abstractmethod
    def parse(self, data: bytes | bytearray, length: int, label: str) -> DocumentTree:
        """Parse the first *length* bytes of *data*.

        Raises :class:`~xpathcat.utils.exceptions.DocumentParseError`.
        """
        ...

    @abstractmethod
    def new_context(self, tree: DocumentTree) -> QueryContext:
        """Raises :class:`~xpathcat.utils.exceptions.ContextError`."""
        ...

    @abstractmethod
    def evaluate(self, context: QueryContext, expression: str) -> QueryResult:
        """Raises :class:`~xpathcat.utils.exceptions.EvaluationError`."""
        ...
