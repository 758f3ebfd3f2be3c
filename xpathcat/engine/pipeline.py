"""Batch pipeline -- runs one expression over a sequence of inputs.

For each input, in order:

1. Read the document bytes.
2. Neutralize the first default namespace declaration.
3. Parse, bind a context and evaluate the expression.
4. Render the result and write the block to the output sink.
5. Release everything acquired in steps 1-3, newest first.

A failure on one input is logged to stderr and the batch moves on.
"""

from __future__ import annotations

from operator import methodcaller
from typing import Iterable, TextIO

from pydantic import BaseModel

from xpathcat.config import STDIN_LABEL
from xpathcat.engine.base import QueryEngine
from xpathcat.engine.lifecycle import ResourceScope
from xpathcat.engine.renderer import ResultRenderer
from xpathcat.sources.neutralizer import neutralize_namespace
from xpathcat.sources.reader import ByteSource, DocumentBuffer
from xpathcat.utils.exceptions import XPathCatError
from xpathcat.utils.logging import get_logger

logger = get_logger("engine.pipeline")

_close = methodcaller("close")


class BatchSummary(BaseModel):
    """Counts for one batch run.

    Attributes:
        total_inputs: Number of inputs processed.
        succeeded: Inputs whose result was rendered.
        failed: Inputs abandoned because of an error.
    """

    total_inputs: int = 0
    succeeded: int = 0
    failed: int = 0


class BatchController:
    """Apply read -> neutralize -> query -> render to each input in turn.

    Parameters
    ----------
    engine:
        Query engine used to parse and evaluate.
    source:
        Byte source for files and standard input.
    renderer:
        Formats each result.
    sink:
        Text stream receiving rendered blocks (usually ``sys.stdout``).
    """

    def __init__(
        self,
        engine: QueryEngine,
        source: ByteSource,
        renderer: ResultRenderer,
        sink: TextIO,
    ) -> None:
        self.engine = engine
        self.source = source
        self.renderer = renderer
        self.sink = sink

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, expression: str, inputs: Iterable[str] = ()) -> BatchSummary:
        """Evaluate *expression* against every input.

        An empty *inputs* means a single read from standard input.
        """
        refs = list(inputs) or [STDIN_LABEL]
        summary = BatchSummary(total_inputs=len(refs))

        for ref in refs:
            if self.process(expression, ref):
                summary.succeeded += 1
            else:
                summary.failed += 1

        logger.info(
            "batch_complete",
            total_inputs=summary.total_inputs,
            succeeded=summary.succeeded,
            failed=summary.failed,
        )
        return summary

    def process(self, expression: str, input_ref: str) -> bool:
        """Process a single input.  Returns ``False`` if it failed."""
        try:
            with ResourceScope(input_ref) as scope:
                buffer = scope.acquire("buffer", self.source.read(input_ref), DocumentBuffer.release)
                neutralize_namespace(buffer)

                tree = scope.acquire(
                    "tree",
                    self.engine.parse(buffer.data, buffer.length, input_ref),
                    _close,
                )
                context = scope.acquire("context", self.engine.new_context(tree), _close)
                result = scope.acquire(
                    "result",
                    self.engine.evaluate(context, expression),
                    methodcaller("detach"),
                )

                block = self.renderer.render(result, tree, input_ref)
                self.sink.write(block)
                self.sink.flush()
        except XPathCatError as exc:
            logger.error(exc.event, input=input_ref, detail=exc.detail)
            return False
        return True
