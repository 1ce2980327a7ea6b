# (c) Nelen & Schuurmans

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any
from typing import BinaryIO
from typing import Optional

from pydantic import field_validator

from ..base.domain import ValueObject
from .response import HttpResponse
from .response import UNKNOWN_SIZE

__all__ = [
    "ReadOptions",
    "ContentLengthMismatch",
    "open_content",
    "iter_content",
    "read_content",
]


logger = logging.getLogger(__name__)


class ReadOptions(ValueObject):
    chunk_size: int = 65536
    verify_size: bool = True

    @field_validator("chunk_size")
    @classmethod
    def chunk_size_positive(cls, v):
        if v <= 0:
            raise ValueError("must be positive")
        return v


class ContentLengthMismatch(ValueError):
    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(expected, actual)

    def __str__(self):
        return f"expected {self.expected} bytes, got {self.actual}"


@contextmanager
def open_content(response: HttpResponse) -> Iterator[Optional[BinaryIO]]:
    """Acquire the body stream of a response, closing it on exit.

    The stream is closed also when the with-block raises. Yields None if
    the response has no content.
    """
    stream: Any = response.content
    try:
        yield stream
    finally:
        if stream is not None and hasattr(stream, "close"):
            stream.close()
            logger.debug("Closed content stream %r", stream)


def iter_content(
    response: HttpResponse, options: Optional[ReadOptions] = None
) -> Iterator[bytes]:
    """Yield chunks from the body stream of a response.

    The stream is consumed (and closed) by this; it cannot be read again.
    """
    if options is None:
        options = ReadOptions()
    with open_content(response) as stream:
        if stream is None:
            return
        while True:
            data = stream.read(options.chunk_size)
            if not data:
                break
            yield data


def read_content(response: HttpResponse, options: Optional[ReadOptions] = None) -> bytes:
    """Read the complete body of a response.

    Args:
        response: The response to consume.
        options: Chunk size and whether to check the body against the
            declared total size. Default: ReadOptions().

    Returns:
        The body as bytes (empty if the response has no content).

    Raises:
        ContentLengthMismatch: if verify_size is set, the response declares a
            total size, and the number of bytes read differs from it.
    """
    if options is None:
        options = ReadOptions()
    data = b"".join(iter_content(response, options))
    if (
        options.verify_size
        and response.total_size != UNKNOWN_SIZE
        and len(data) != response.total_size
    ):
        raise ContentLengthMismatch(response.total_size, len(data))
    return data
