from buildit import Headers
from buildit import HttpMethod
from buildit import RequestBuilder
from buildit import RequestDescriptor


def test_defaults():
    request = RequestDescriptor("https://apple.com")

    assert request.url == "https://apple.com"
    assert request.method == HttpMethod.GET
    assert len(request.headers) == 0
    assert request.body is None


def test_headers_are_read_only_snapshot():
    request = RequestDescriptor("https://apple.com", headers={"Accept": "text/html"})
    request.headers["Accept"] = "changed"
    assert request.headers["Accept"] == "text/html"


def test_equality_and_hash():
    first = RequestDescriptor(
        "https://apple.com", "POST", Headers({"a": "1", "b": "2"}), b"data"
    )
    second = RequestDescriptor(
        "https://apple.com", HttpMethod.POST, {"b": "2", "a": "1"}, bytearray(b"data")
    )
    third = RequestDescriptor("https://apple.com", HttpMethod.PUT)

    assert first == second
    assert hash(first) == hash(second)
    assert first != third


def test_to_dict():
    request = (
        RequestBuilder()
        .post()
        .host("api.somehost.com")
        .path("items")
        .set_header("application/json", "Accept")
        .body(b"{}")
        .build()
    )

    assert request.to_dict() == {
        "url": "https://api.somehost.com/items",
        "method": "POST",
        "headers": {"Accept": "application/json"},
        "body": b"{}",
    }


def test_url_parts():
    request = RequestBuilder().host("api.somehost.com").query("page", "2").build()
    parts = request.url_parts()

    assert parts.get_domain() == "api.somehost.com"
    assert parts.query_items == [("page", "2")]


def test_repr():
    request = RequestBuilder().delete().host("apple.com").build()
    assert repr(request) == "<RequestDescriptor DELETE https://apple.com>"
