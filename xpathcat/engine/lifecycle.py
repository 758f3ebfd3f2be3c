"""Scoped release of the resources acquired while processing one input."""

from __future__ import annotations

from contextlib import ExitStack
from typing import Callable, TypeVar

from xpathcat.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class ResourceScope:
    """Release registered resources in reverse order on exit.

    A resource is registered only after it has been acquired, so a stage
    that fails never has its own release called.  Each release runs exactly
    once, whether the block exits normally or through an exception::

        with ResourceScope(label) as scope:
            buffer = scope.acquire("buffer", source.read(ref), DocumentBuffer.release)
            tree = scope.acquire("tree", engine.parse(...), lambda t: t.close())
    """

    def __init__(self, label: str) -> None:
        self.label = label
        self._stack = ExitStack()

    def __enter__(self) -> ResourceScope:
        self._stack.__enter__()
        return self

    def __exit__(self, *exc_info) -> bool:
        return self._stack.__exit__(*exc_info)

    def acquire(self, name: str, resource: T, release: Callable[[T], None]) -> T:
        """Register *resource* for release and hand it back."""
        self._stack.callback(self._release, name, resource, release)
        return resource

    def _release(self, name: str, resource: T, release: Callable[[T], None]) -> None:
        release(resource)
        logger.debug("resource_released", input=self.label, resource=name)
