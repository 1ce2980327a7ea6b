# (c) Nelen & Schuurmans

import logging
from collections.abc import Mapping
from io import BytesIO
from typing import Any
from typing import TypeVar

from pydantic import field_validator

from ..base.domain import ValueObject
from .headers import Headers

__all__ = ["HttpResponse", "HttpResponseBuilder", "UNKNOWN_SIZE"]


UNKNOWN_SIZE = -1

logger = logging.getLogger(__name__)


class HttpResponse(ValueObject):
    """The http response received from the server.

    Instances are immutable, except for the body: ``content`` is a stream that
    can be read only once and cannot be rewound. Whoever reads it is
    responsible for closing it, see ``parse_http.open_content``.

    Instances are constructed through ``HttpResponseBuilder``. Use
    ``new_builder()`` to derive a modified copy.
    """

    status_code: int = 0
    content: Any = None  # typing of BinaryIO / BytesIO is hard!
    total_size: int = UNKNOWN_SIZE
    reason_phrase: str | None = None
    content_type: str | None = None
    headers: Headers = Headers()

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        if isinstance(v, bytes):
            return BytesIO(v)
        assert v is None or hasattr(v, "read")  # poor-mans BinaryIO validation
        return v

    @property
    def is_success(self) -> bool:
        """Returns True on 2xx status"""
        return (self.status_code // 100) == 2

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name)

    def new_builder(self) -> "HttpResponseBuilder":
        """Makes a new builder with all values taken from this response."""
        return HttpResponseBuilder(self)


B = TypeVar("B", bound="HttpResponseBuilder")


class HttpResponseBuilder:
    """Builder of HttpResponse.

    The setters return the builder, so calls can be chained::

        HttpResponseBuilder().set_status_code(200).add_header("ETag", "x").build()

    Args:
        response: If given, the builder starts out with all values of this
            response (the headers are copied).
    """

    def __init__(self, response: HttpResponse | None = None):
        self._status_code = 0
        self._content: Any = None
        self._total_size = UNKNOWN_SIZE
        self._reason_phrase: str | None = None
        self._content_type: str | None = None
        self._headers: dict[str, str] = {}
        if response is not None:
            self.set_status_code(response.status_code)
            self.set_content(response.content)
            self.set_total_size(response.total_size)
            self.set_content_type(response.content_type)
            self.set_headers(response.headers)
            self.set_reason_phrase(response.reason_phrase)

    def set_status_code(self: B, status_code: int) -> B:
        self._status_code = status_code
        return self

    def set_content(self: B, content: Any) -> B:
        # the previous stream is left open: closing is up to its owner
        if self._content is not None and content is not self._content:
            logger.debug("Replacing content stream %r", self._content)
        self._content = content
        return self

    def set_total_size(self: B, total_size: int) -> B:
        self._total_size = total_size
        return self

    def set_reason_phrase(self: B, reason_phrase: str | None) -> B:
        self._reason_phrase = reason_phrase
        return self

    def set_content_type(self: B, content_type: str | None) -> B:
        self._content_type = content_type
        return self

    def set_headers(self: B, headers: Mapping[str, str]) -> B:
        self._headers = dict(headers)
        return self

    def add_headers(self: B, headers: Mapping[str, str]) -> B:
        self._headers.update(headers)
        return self

    def add_header(self: B, key: str, value: str) -> B:
        self._headers[key] = value
        return self

    def build(self) -> HttpResponse:
        """Snapshot the current values into a new HttpResponse.

        Raises:
            BadRequest: if one of the values has the wrong type
        """
        return HttpResponse.create(
            status_code=self._status_code,
            content=self._content,
            total_size=self._total_size,
            reason_phrase=self._reason_phrase,
            content_type=self._content_type,
            headers=self._headers,
        )
