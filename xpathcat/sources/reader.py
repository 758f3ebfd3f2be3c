"""Byte source -- reads whole documents into owned, mutable buffers.

Two forms are supported:

* **Standard input** (``-``): the stream is drained in fixed-size chunks
  until end of stream.
* **Named file**: the size is probed with :func:`os.stat` and exactly that
  many bytes are read.  A short read is reported but is not fatal.
"""

from __future__ import annotations

import os
import sys
from typing import BinaryIO, Optional

from xpathcat.config import DEFAULT_READ_CHUNK_SIZE, STDIN_LABEL
from xpathcat.utils.exceptions import InputReadError
from xpathcat.utils.logging import get_logger

logger = get_logger(__name__)


class DocumentBuffer:
    """Raw bytes of one input, owned by that input's processing.

    Attributes:
        label: The input reference the bytes were read from.
        data: Mutable document bytes.
        length: Exact number of bytes read.
    """

    def __init__(self, label: str, data: bytearray) -> None:
        self.label = label
        self.data = data
        self.length = len(data)
        self.released = False

    def release(self) -> None:
        """Drop the bytes.  Later calls are no-ops."""
        if self.released:
            return
        self.data = bytearray()
        self.length = 0
        self.released = True

    def __repr__(self) -> str:
        return f"DocumentBuffer(label={self.label!r}, length={self.length})"


class ByteSource:
    """Acquire document bytes from standard input or the filesystem.

    Parameters
    ----------
    stdin:
        Binary stream used for the ``-`` input.  Defaults to
        ``sys.stdin.buffer`` looked up at read time.
    chunk_size:
        Read size used while draining a stream.
    """

    def __init__(
        self,
        stdin: Optional[BinaryIO] = None,
        chunk_size: int = DEFAULT_READ_CHUNK_SIZE,
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self._stdin = stdin
        self.chunk_size = chunk_size

    def read(self, input_ref: str) -> DocumentBuffer:
        """Read the whole of *input_ref* into a :class:`DocumentBuffer`.

        Raises
        ------
        InputReadError
            When the input cannot be opened or read.
        """
        if input_ref == STDIN_LABEL:
            stream = self._stdin if self._stdin is not None else sys.stdin.buffer
            buffer = self.read_stream(stream, input_ref)
        else:
            buffer = self.read_file(input_ref)

        logger.debug("input_read", input=input_ref, size=buffer.length)
        return buffer

    def read_stream(self, stream: BinaryIO, label: str = STDIN_LABEL) -> DocumentBuffer:
        data = bytearray()
        try:
            while True:
                chunk = stream.read(self.chunk_size)
                if not chunk:
                    break
                data += chunk
        except OSError as exc:
            raise InputReadError(label, f"Can't read input into memory: {exc}") from exc
        return DocumentBuffer(label, data)

    def read_file(self, path: str) -> DocumentBuffer:
        try:
            expected = os.stat(path).st_size
            with open(path, "rb") as fh:
                data = bytearray(fh.read(expected))
        except OSError as exc:
            raise InputReadError(path, f"Couldn't open input file {path}: {exc}") from exc

        if len(data) < expected:
            logger.warning(
                "read_truncated",
                input=path,
                expected=expected,
                got=len(data),
            )
        return DocumentBuffer(path, data)
