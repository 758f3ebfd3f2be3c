"""lxml (libxml2) implementation of :class:`QueryEngine`.

Documents are parsed with blank text removal, matching libxml2's
``XML_PARSE_NOBLANKS``, and entity references are left unexpanded.
Queries are XPath 1.0 expressions evaluated from the document node.
"""

from __future__ import annotations

from typing import Any, Optional

from lxml import etree

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
from xpathcat.utils.exceptions import ContextError, DocumentParseError, EvaluationError
from xpathcat.utils.logging import get_logger
from xpathcat.utils.text import encode_entities

logger = get_logger(__name__)


class LxmlDocument(DocumentTree):
    def __init__(self, label: str, tree: etree._ElementTree) -> None:
        super().__init__(label)
        self._tree: Optional[etree._ElementTree] = tree

    @property
    def tree(self) -> etree._ElementTree:
        if self._tree is None:
            raise RuntimeError(f"Document {self.label!r} has been released")
        return self._tree

    def children_text(self, node: NodeRef) -> Optional[str]:
        if self._tree is None or node.handle is None:
            raise RuntimeError(f"Node reference into {self.label!r} is no longer valid")
        return _flatten_children_text(node.handle)

    def close(self) -> None:
        self._tree = None
        super().close()


class LxmlContext(QueryContext):
    def __init__(self, tree: LxmlDocument, evaluator: etree.XPathDocumentEvaluator) -> None:
        super().__init__(tree)
        self.evaluator: Optional[etree.XPathDocumentEvaluator] = evaluator

    def close(self) -> None:
        self.evaluator = None
        super().close()


class LxmlQueryEngine(QueryEngine):
    """Query engine backed by :mod:`lxml.etree`.

    Parameters
    ----------
    remove_blank_text:
        Drop whitespace-only text between elements while parsing.
    huge_tree:
        Lift libxml2's safety limits on tree depth and text size.
    """

    def __init__(self, remove_blank_text: bool = True, huge_tree: bool = False) -> None:
        self.remove_blank_text = remove_blank_text
        self.huge_tree = huge_tree

    def parse(self, data: bytes | bytearray, length: int, label: str) -> LxmlDocument:
        parser = etree.XMLParser(
            remove_blank_text=self.remove_blank_text,
            huge_tree=self.huge_tree,
            # Entity references stay in the tree and render as &name;
            resolve_entities=False,
        )
        try:
            root = etree.fromstring(bytes(data[:length]), parser=parser, base_url=label)
        except (etree.XMLSyntaxError, ValueError) as exc:
            raise DocumentParseError(label, f"Document not parsed successfully: {exc}") from exc

        logger.debug("document_parsed", input=label, root=root.tag)
        return LxmlDocument(label, root.getroottree())

    def new_context(self, tree: DocumentTree) -> LxmlContext:
        if not isinstance(tree, LxmlDocument):
            raise ContextError(tree.label, f"Can't create XPath context for {type(tree).__name__}")
        try:
            evaluator = etree.XPathEvaluator(tree.tree, smart_strings=True)
        except (etree.XPathError, RuntimeError) as exc:
            raise ContextError(tree.label, f"Can't create XPath context: {exc}") from exc
        return LxmlContext(tree, evaluator)

    def evaluate(self, context: QueryContext, expression: str) -> QueryResult:
        label = context.tree.label
        if not isinstance(context, LxmlContext) or context.evaluator is None:
            raise EvaluationError(label, expression, "XPath context is not usable")
        try:
            value = context.evaluator(expression)
        except etree.XPathError as exc:
            raise EvaluationError(label, expression, f"XPath expression invalid: {exc}") from exc

        result = _to_query_result(value, label, expression)
        logger.debug("query_evaluated", input=label, kind=result.kind.value)
        return result


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _to_query_result(value: Any, label: str, expression: str) -> QueryResult:
    if isinstance(value, bool):
        return BooleanResult(value=value)
    if isinstance(value, float):
        return NumberResult(value=value)
    if isinstance(value, str):
        return StringResult(value=str(value))
    if isinstance(value, list):
        return NodeCollectionResult(nodes=[_node_ref(item) for item in value])
    raise EvaluationError(label, expression, f"Unsupported XPath result type {type(value).__name__}")


def _node_ref(item: Any) -> NodeRef:
    if isinstance(item, etree._Element):
        # Comments, PIs and entities carry a factory function as their tag.
        if isinstance(item.tag, str):
            return NodeRef(kind=NodeKind.ELEMENT, name=etree.QName(item).localname, handle=item)
        return NodeRef(kind=NodeKind.OTHER, handle=item)
    if isinstance(item, str) and (getattr(item, "is_text", False) or getattr(item, "is_tail", False)):
        return NodeRef(kind=NodeKind.TEXT, content=str(item), handle=item)
    # Attribute values, namespace tuples
    return NodeRef(kind=NodeKind.OTHER, handle=item)


def _flatten_children_text(element: etree._Element) -> Optional[str]:
    """Concatenate the direct text children of *element*.

    Nested elements contribute only their tails.  Entity references are kept
    as ``&name;`` and markup characters are re-encoded.
    """
    parts: list[str] = []
    if element.text:
        parts.append(encode_entities(element.text))
    for child in element:
        if isinstance(child, etree._Entity):
            parts.append(child.text)
        if child.tail:
            parts.append(encode_entities(child.tail))
    return "".join(parts) if parts else None
