from typing import Any
from typing import Dict
from typing import Mapping
from typing import Optional
from typing import Union

from buildit.headers import Headers
from buildit.methods import HttpMethod
from buildit.urls import Url
from buildit.urls import parse_url


class RequestDescriptor:
    """
    Finished, read-only description of an HTTP request.

    Produced by `RequestBuilder.build`; sending it is up to the caller's
    transport, `to_dict` gives the keyword arguments most clients accept.
    """

    __slots__ = ("_url", "_method", "_headers", "_body")

    def __init__(
        self,
        url: Union[Url, str],
        method: HttpMethod = HttpMethod.GET,
        headers: Union[Headers, Mapping[str, str], None] = None,
        body: Optional[bytes] = None,
    ) -> None:
        self._url = str(url)
        self._method = HttpMethod.parse(method)
        self._headers = Headers(headers).copy()
        self._body = bytes(body) if body is not None else None

    @property
    def url(self) -> str:
        return self._url

    @property
    def method(self) -> HttpMethod:
        return self._method

    @property
    def headers(self) -> Headers:
        return self._headers.copy()

    @property
    def body(self) -> Optional[bytes]:
        return self._body

    def url_parts(self) -> Url:
        return parse_url(self._url)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self._url,
            "method": self._method.value,
            "headers": self._headers.dict(),
            "body": self._body,
        }

    def __eq__(self, _value) -> bool:
        if type(self) != type(_value):
            return NotImplemented
        return (
            self._url == _value.url
            and self._method == _value.method
            and self._headers == _value.headers
            and self._body == _value.body
        )

    def __hash__(self):
        return hash((self._url, self._method, frozenset(self._headers.items()), self._body))

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._method.value} {self._url}>"
