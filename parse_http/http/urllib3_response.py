# (c) Nelen & Schuurmans

from urllib3 import HTTPResponse

from .response import HttpResponse
from .response import HttpResponseBuilder
from .response import UNKNOWN_SIZE

__all__ = ["from_urllib3"]


def from_urllib3(response: HTTPResponse) -> HttpResponse:
    """Convert a received urllib3 response into an HttpResponse.

    The urllib3 response itself becomes the content stream, so request it with
    ``preload_content=False`` to keep the body unread. Repeated header fields
    are joined with ", ".

    The total size is the body length urllib3 expects (0 for HEAD requests and
    for 1xx, 204 and 304 responses). It is unknown when a Content-Encoding is
    present: urllib3 decodes the body, so the number of bytes read would not
    match the encoded length.
    """
    headers = {key: response.headers[key] for key in response.headers}
    content_encoding = response.headers.get("Content-Encoding")
    if content_encoding is not None and content_encoding.lower() != "identity":
        total_size = UNKNOWN_SIZE
    elif response.length_remaining is None:
        total_size = UNKNOWN_SIZE
    else:
        total_size = response.length_remaining
    return (
        HttpResponseBuilder()
        .set_status_code(response.status)
        .set_reason_phrase(response.reason)
        .set_headers(headers)
        .set_content_type(response.headers.get("Content-Type"))
        .set_total_size(total_size)
        .set_content(response)
        .build()
    )
