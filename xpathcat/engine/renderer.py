"""Result renderer -- turns a :data:`QueryResult` into deterministic text.

Output records, one per line, each optionally prefixed by the input label::

    'some string'
    '2.000000'
    'true'
    NULL
    '[
     "child2": "hello",
    "a text node"
    ]'

The punctuation (single quotes around the block, a trailing comma after
each element entry, none after text nodes) is relied on by downstream
consumers and must not change.
"""

from __future__ import annotations

from xpathcat.config import STDIN_LABEL
from xpathcat.engine.base import (
    BooleanResult,
    DocumentTree,
    NodeCollectionResult,
    NodeKind,
    NumberResult,
    QueryResult,
    StringResult,
)
from xpathcat.utils.text import trim_space


class ResultRenderer:
    """Render query results for one input at a time."""

    def render(self, result: QueryResult, tree: DocumentTree, label: str) -> str:
        """Return the full text block for *result*, label prefix included.

        Every record is prefixed with ``"<label>: "`` unless *label* is the
        standard-input sentinel.
        """
        prefix = "" if label == STDIN_LABEL else f"{label}: "
        return "".join(prefix + record for record in self.records(result, tree))

    def records(self, result: QueryResult, tree: DocumentTree) -> list[str]:
        """Return the unprefixed output records, each ending in a newline."""
        if isinstance(result, StringResult):
            return [f"'{trim_space(result.value)}'\n"]

        if isinstance(result, NumberResult):
            return ["'%f'\n" % result.value]

        if isinstance(result, BooleanResult):
            return ["'%s'\n" % ("true" if result.value else "false")]

        if isinstance(result, NodeCollectionResult):
            return self._node_collection_records(result, tree)

        raise TypeError(f"Cannot render result of type {type(result).__name__}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _node_collection_records(result: NodeCollectionResult, tree: DocumentTree) -> list[str]:
        # Absent collection: a valid result, not a failure.
        if result.nodes is None:
            return ["NULL\n"]

        records = ["'[\n"]
        for node in result.nodes:
            if node.kind == NodeKind.ELEMENT:
                text = tree.children_text(node)
                records.append(f' "{node.name}": "{trim_space(text) if text else ""}",\n')
            elif node.kind == NodeKind.TEXT:
                records.append(f'"{trim_space(node.content)}"\n')
        records.append("]'\n")
        return records
