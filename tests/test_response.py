import io

import pytest
from pydantic import ValidationError

from parse_http import BadRequest
from parse_http import Headers
from parse_http import HttpResponse
from parse_http import HttpResponseBuilder
from parse_http import UNKNOWN_SIZE


@pytest.fixture
def stream():
    return io.BytesIO(b'{"foo": 2}')


@pytest.fixture
def response(stream) -> HttpResponse:
    return (
        HttpResponseBuilder()
        .set_status_code(200)
        .set_content(stream)
        .set_total_size(10)
        .set_reason_phrase("OK")
        .set_content_type("application/json")
        .set_headers({"ETag": "abc", "Content-Type": "application/json"})
        .build()
    )


def test_fields(response: HttpResponse, stream):
    assert response.status_code == 200
    assert response.content is stream
    assert response.total_size == 10
    assert response.reason_phrase == "OK"
    assert response.content_type == "application/json"
    assert response.headers == {"ETag": "abc", "Content-Type": "application/json"}


def test_defaults():
    response = HttpResponseBuilder().build()

    assert response.status_code == 0
    assert response.content is None
    assert response.total_size == UNKNOWN_SIZE == -1
    assert response.reason_phrase is None
    assert response.content_type is None
    assert response.headers == {}


def test_get_header(response: HttpResponse):
    assert response.get_header("ETag") == "abc"


@pytest.mark.parametrize("name", ["missing-key", "etag", "ETAG", ""])
def test_get_header_absent(response: HttpResponse, name):
    assert response.get_header(name) is None


def test_headers_read_only(response: HttpResponse):
    assert isinstance(response.headers, Headers)
    with pytest.raises(TypeError):
        response.headers["ETag"] = "def"  # type: ignore

    assert response.get_header("ETag") == "abc"


@pytest.mark.parametrize(
    "field,value",
    [
        ("status_code", 500),
        ("total_size", 3),
        ("reason_phrase", "Server Error"),
        ("content_type", "text/plain"),
        ("headers", {}),
    ],
)
def test_frozen(response: HttpResponse, field, value):
    with pytest.raises(ValidationError):
        setattr(response, field, value)


def test_content_not_copied(response: HttpResponse, stream):
    assert response.content.read() == b'{"foo": 2}'
    assert stream.read() == b""
    assert response.content.read() == b""  # single use


def test_bytes_content_becomes_stream():
    response = HttpResponseBuilder().set_content(b"foo").build()

    assert response.content.read() == b"foo"


def test_non_stream_content_err():
    with pytest.raises(BadRequest):
        HttpResponseBuilder().set_content(42).build()


def test_wrong_type_err():
    with pytest.raises(BadRequest):
        HttpResponseBuilder().set_status_code("not-a-status").build()  # type: ignore


@pytest.mark.parametrize(
    "status_code,expected",
    [(0, False), (200, True), (204, True), (299, True), (301, False), (404, False)],
)
def test_is_success(status_code, expected):
    response = HttpResponseBuilder().set_status_code(status_code).build()

    assert response.is_success is expected


def test_no_status_validation():
    response = HttpResponseBuilder().set_status_code(999).build()

    assert response.status_code == 999


def test_new_builder_idempotent(response: HttpResponse):
    assert response.new_builder().build() == response


def test_new_builder_is_a_copy(response: HttpResponse):
    modified = response.new_builder().set_status_code(201).add_header("X", "1").build()

    assert modified.status_code == 201
    assert modified.get_header("X") == "1"
    assert modified.content is response.content
    assert response.status_code == 200
    assert response.get_header("X") is None


def test_update(response: HttpResponse):
    updated = response.update(status_code=304, headers={"ETag": "def"})

    assert updated.status_code == 304
    assert updated.get_header("ETag") == "def"
    assert updated.content is response.content
    assert response.status_code == 200
    assert response.get_header("ETag") == "abc"


def test_update_validates(response: HttpResponse):
    with pytest.raises(BadRequest):
        response.update(total_size="unknown")


def test_eq(response: HttpResponse, stream):
    other = response.new_builder().build()

    assert other == response
    assert other.headers is not response.headers


def test_neq_other_stream(response: HttpResponse):
    assert response.new_builder().set_content(io.BytesIO()).build() != response


def test_hashable(response: HttpResponse):
    assert len({response, response.new_builder().build()}) == 1
