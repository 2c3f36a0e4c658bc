import json as _json
import logging
from typing import Any
from typing import List
from typing import Mapping
from typing import Optional
from typing import Tuple
from typing import TypeVar
from typing import Union

from buildit.document import Document
from buildit.errors.parser import UnrecognizedConfiguration
from buildit.errors.requests import MalformedRequest
from buildit.headers import Headers
from buildit.methods import HttpMethod
from buildit.methods import Scheme
from buildit.request import RequestDescriptor
from buildit.settings import BODY_ENCODING
from buildit.settings import DEFAULT_METHOD
from buildit.settings import DEFAULT_SCHEME
from buildit.settings import LOGGER_NAME
from buildit.urls import Url
from buildit.urls import compose_url
from buildit.urls import recompose_url

log = logging.getLogger(LOGGER_NAME)

RB = TypeVar("RB", bound="RequestBuilder")
CONTENT = Union[str, bytes, bytearray]


class RequestBuilder:
    """
    Accumulates request configuration through chained calls.

    Nothing is validated until `build`, which answers `None` when the
    collected state can't be turned into an absolute URL. The builder is not
    reset by `build` and can be reused for further requests.

    :Example:

    >>> from buildit import RequestBuilder
    >>> RequestBuilder().host("api.somehost.com").path("some/path").query("page", "2").build()
    <RequestDescriptor GET https://api.somehost.com/some/path?page=2>
    """

    def __init__(self) -> None:
        self._explicit_url: Union[Url, str, None] = None
        self._scheme: str = DEFAULT_SCHEME
        self._host: Optional[str] = None
        self._path: Optional[str] = None
        self._method = HttpMethod.parse(DEFAULT_METHOD)
        self._headers = Headers()
        self._query_items: List[Tuple[str, str]] = []
        self._body: Optional[bytes] = None

    # URL

    def url(self: RB, url: Union[Url, str]) -> RB:
        self._explicit_url = url
        return self

    def scheme(self: RB, scheme: str) -> RB:
        self._scheme = scheme
        return self

    def http(self: RB) -> RB:
        return self.scheme(Scheme.http.value)

    def https(self: RB) -> RB:
        return self.scheme(Scheme.https.value)

    def host(self: RB, host: str) -> RB:
        self._host = host
        return self

    def path(self: RB, path: str) -> RB:
        self._path = path
        return self

    def query(self: RB, name: str, value: str) -> RB:
        self._query_items.append((name, value))
        return self

    # HTTP method

    def method(self: RB, method: Union[HttpMethod, str]) -> RB:
        self._method = HttpMethod.parse(method)
        return self

    def get(self: RB) -> RB:
        return self.method(HttpMethod.GET)

    def post(self: RB) -> RB:
        return self.method(HttpMethod.POST)

    def put(self: RB) -> RB:
        return self.method(HttpMethod.PUT)

    def delete(self: RB) -> RB:
        return self.method(HttpMethod.DELETE)

    # Headers

    def set_header(self: RB, value: str, field: str) -> RB:
        """
        Adds a value to the header field, a field that is already set
        receives it comma separated: "text/html" then "application/xml"
        gives "text/html,application/xml".
        """
        self._headers.add(field, value)
        return self

    def replace_header(self: RB, value: Optional[str], field: str) -> RB:
        """
        Overwrites the header field, `None` removes it.
        """
        if value is None:
            if field in self._headers:
                del self._headers[field]
        else:
            self._headers[field] = value
        return self

    # Body

    def body(self: RB, content: Optional[CONTENT]) -> RB:
        if isinstance(content, str):
            content = content.encode(BODY_ENCODING)
        self._body = bytes(content) if content is not None else None
        return self

    def json(self: RB, payload: Any) -> RB:
        self.body(_json.dumps(payload))
        return self.replace_header("application/json", "Content-Type")

    # Configuration documents

    def request(self: RB, name: Optional[str], document: Optional[Mapping[str, Any]]) -> RB:
        """
        Applies a configuration document on top of the current state.

        Top-level keys act as defaults shared by every request, the object
        stored under `name` (when present) overrides them key by key.
        Recognised keys are `host`, `scheme`, `path`, `httpMethod`, `headers`
        and `queries`; anything else is ignored.

        :Example:

        >>> from buildit import RequestBuilder
        >>> document = {
        ...     "host": "api.somehost.com",
        ...     "headers": {"Accept": "text/html"},
        ...     "RequestGET": {"path": "some/path"},
        ... }
        >>> RequestBuilder().request("RequestGET", document).build()
        <RequestDescriptor GET https://api.somehost.com/some/path>
        """
        common = Document.wrap(document)
        if common is None:
            log.debug("Configuration document is missing, nothing to apply")
            return self

        self._apply_document(common, defaults=True)

        if name is not None:
            section = common.node(name)
            if section is None:
                log.debug(f"No `{name}` section in configuration, using common keys only")
            else:
                self._apply_document(section, defaults=False)
        return self

    def _apply_document(self, document: Document, defaults: bool) -> None:
        host = document.string("host")
        if host is not None:
            self._host = host

        path = document.string("path")
        if path is not None:
            self._path = path

        scheme = document.string("scheme")
        if scheme is not None:
            self._scheme = scheme
        elif defaults:
            self._scheme = DEFAULT_SCHEME

        method = self._document_method(document)
        if method is not None:
            self._method = method
        elif defaults:
            self._method = HttpMethod.parse(DEFAULT_METHOD)

        headers = document.mapping("headers")
        if headers is not None:
            for field, value in headers.items():
                self.set_header(value, field)

        queries = document.pairs("queries")
        if queries is not None:
            self._query_items = queries

    @staticmethod
    def _document_method(document: Document) -> Optional[HttpMethod]:
        method = document.string("httpMethod")
        if method is None:
            return None
        try:
            return HttpMethod.parse(method)
        except ValueError:
            log.debug(str(UnrecognizedConfiguration("httpMethod", method)))
            return None

    # Build

    def _resolve_url(self) -> Url:
        if self._explicit_url is not None:
            return recompose_url(self._explicit_url, self._scheme, self._query_items)
        return compose_url(self._scheme, self._host, self._path, self._query_items)

    def build(self) -> Optional[RequestDescriptor]:
        """
        Call this method **last**, after every other configuration call.

        Returns a fully initialized `RequestDescriptor` or `None` when the
        URL can't be resolved (no url or host given, invalid scheme or host).
        """
        try:
            url = self._resolve_url()
        except MalformedRequest as err:
            log.debug(f"Request can't be built: {err}")
            return None

        log.debug(f"Built {self._method.value} {url}")
        return RequestDescriptor(
            url=url,
            method=self._method,
            headers=self._headers,
            body=self._body,
        )

    def __repr__(self) -> str:
        target = self._explicit_url or self._host
        return f"<{type(self).__name__} {self._method.value} {target}>"
