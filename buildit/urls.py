import ipaddress
import re
from typing import Iterable
from typing import List
from typing import Optional
from typing import Tuple
from typing import Union
from urllib.parse import parse_qsl
from urllib.parse import quote
from urllib.parse import urlencode
from urllib.parse import urlsplit
from urllib.parse import urlunsplit

import dns.exception  # type: ignore
import dns.name  # type: ignore

from buildit.errors.parser import UrlParsingError

QueryItems = Iterable[Tuple[str, str]]

scheme_regex = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
authority_regex = re.compile(r"^(?P<host>\[[^\]]*\]|[^:]*)(?::(?P<port>[^:]*))?$")
reg_name_regex = re.compile(r"^(?:[A-Za-z0-9\-._~!$&'()*+,;=]|%[0-9A-Fa-f]{2})+$")

# Characters left as-is by the composer
PATH_SAFE = "/:@!$&'()*+,;=%"
QUERY_SAFE = "/?:@"


def parse_url(url: Union[str, "Url"]) -> "Url":
    if isinstance(url, Url):
        return url.copy()

    try:
        parts = urlsplit(str(url))
    except ValueError as err:
        raise UrlParsingError(str(url), str(err)) from err

    return Url(
        scheme=parts.scheme,
        netloc=parts.netloc,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
    )


def normalize_path(path: Optional[str]) -> str:
    """
    :Example:

    >>> from buildit.urls import normalize_path
    >>> normalize_path("some/path")
    '/some/path'
    >>> normalize_path("/some/path")
    '/some/path'
    >>> normalize_path(None)
    ''
    """
    if path is None:
        return ""
    if path.startswith("/"):
        return path
    return "/" + path


def compose_url(
    scheme: str,
    host: Optional[str],
    path: Optional[str],
    query_items: QueryItems = (),
) -> "Url":
    """
    Builds a validated absolute url from separate components.

    The path gets a leading slash when it misses one and is percent-encoded,
    query items are encoded and joined in the given order.
    """
    if not host:
        raise UrlParsingError(f"{scheme}://", "missing host")

    url = Url(
        scheme=scheme,
        netloc=host,
        path=quote(normalize_path(path), safe=PATH_SAFE),
    )
    url.query_items = list(query_items)
    url.validate()
    return url


def recompose_url(
    url: Union[str, "Url"], scheme: str, query_items: QueryItems = ()
) -> "Url":
    """
    Rebases an existing url onto another scheme.

    Non-empty query items replace the url's own query, otherwise the query
    is kept untouched.
    """
    new_url = parse_url(url)
    new_url.scheme = scheme

    query_items = list(query_items)
    if query_items:
        new_url.query_items = query_items

    new_url.validate()
    return new_url


def validate_host(host: str) -> None:
    if host.startswith("["):
        ipaddress.IPv6Address(host[1:-1])
        return

    if not reg_name_regex.match(host):
        raise ValueError(f"Host {host!r} contains forbidden characters")

    try:
        ipaddress.ip_address(host)
        return
    except ValueError:
        pass

    try:
        dns.name.from_text(host)
    except dns.exception.DNSException as err:
        raise ValueError(f"Host {host!r} is not a valid domain name: {err}") from err


class Url:
    def __init__(
        self,
        scheme: str,
        netloc: str,
        path: str = "",
        query: str = "",
        fragment: str = "",
    ):
        self.scheme = scheme
        self.netloc = netloc
        self.path = path
        self.query = query
        self.fragment = fragment

    @property
    def query_items(self) -> List[Tuple[str, str]]:
        return parse_qsl(self.query, keep_blank_values=True)

    @query_items.setter
    def query_items(self, items: QueryItems) -> None:
        self.query = urlencode(list(items), safe=QUERY_SAFE, quote_via=quote)

    @property
    def userinfo(self) -> Optional[str]:
        userinfo, sep, _ = self.netloc.rpartition("@")
        return userinfo if sep else None

    def _authority(self) -> Tuple[str, Optional[str]]:
        _, _, hostport = self.netloc.rpartition("@")
        match = authority_regex.match(hostport)
        if not match:
            raise UrlParsingError(str(self), f"unexpected authority {hostport!r}")
        return match.group("host"), match.group("port")

    @property
    def host(self) -> str:
        return self._authority()[0]

    @property
    def port(self) -> Optional[int]:
        port = self._authority()[1]
        return int(port) if port else None

    def get_domain(self) -> str:
        return self.host.strip("[]")

    def validate(self) -> None:
        if not scheme_regex.match(self.scheme or ""):
            raise UrlParsingError(str(self), f"invalid scheme {self.scheme!r}")

        host, port = self._authority()
        if not host:
            raise UrlParsingError(str(self), "missing host")

        try:
            validate_host(host)
        except ValueError as err:
            raise UrlParsingError(str(self), str(err)) from err

        if port and not (port.isdigit() and int(port) <= 65535):
            raise UrlParsingError(str(self), f"invalid port {port!r}")

    def copy(self) -> "Url":
        return Url(
            scheme=self.scheme,
            netloc=self.netloc,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return str(self) == str(other)

    def __str__(self) -> str:
        return urlunsplit(
            (self.scheme, self.netloc, self.path, self.query, self.fragment)
        )

    def __repr__(self):
        return f"<Url {str(self)}>"
