"""
Header mapping used while a request is being assembled
"""
import logging
from typing import Dict
from typing import Iterator
from typing import Mapping
from typing import Optional
from typing import TypeVar
from typing import Union

from buildit.settings import HEADER_SEPARATOR
from buildit.settings import LOGGER_NAME

log = logging.getLogger(LOGGER_NAME)

T = TypeVar("T", bound="Headers")


class MetaHeaders(type):
    def __call__(cls, initial_headers=None):
        """
        If 'initial headers' passed through 'Headers' is already an instance of 'Headers,'
        return it rather than creating a new one.
        """
        if isinstance(initial_headers, Headers):
            return initial_headers
        return super(MetaHeaders, cls).__call__(initial_headers)


class Headers(metaclass=MetaHeaders):
    """
    Ordered header mapping that keeps field names exactly as supplied.

    Item assignment overwrites, `add` merges a repeated field into a single
    comma separated value.

    :Example:

    >>> from buildit.headers import Headers
    >>> headers = Headers()
    >>> headers.add("Accept", "text/html").add("Accept", "application/xhtml+xml")
    Headers:
     Accept: text/html,application/xhtml+xml
    >>> headers["Accept"] = "*/*"
    >>> headers["Accept"]
    '*/*'
    """

    separator = HEADER_SEPARATOR

    def __init__(self, initial_headers: Optional[Union[Mapping[str, str], T]] = None):
        self._headers: Dict[str, str] = {}

        if initial_headers:
            for key, value in initial_headers.items():
                self[key] = value

    def __setitem__(self, key: str, value: str):
        self._headers[key] = value

    def __getitem__(self, item: str) -> str:
        return self._headers[item]

    def __delitem__(self, item: str):
        del self._headers[item]

    def add(self: T, key: str, value: str) -> T:
        existing = self._headers.get(key)
        if existing is None:
            self[key] = value
        else:
            log.trace(f"Merging `{key}` header: {existing!r} + {value!r}")  # type: ignore
            self[key] = f"{existing}{self.separator}{value}"
        return self

    def items(self):
        return self._headers.items()

    def keys(self):
        return self._headers.keys()

    def get(self, name: str, default=None):
        return self._headers.get(name, default)

    def dict(self) -> Dict[str, str]:
        return dict(self._headers)

    def copy(self) -> "Headers":
        return Headers(initial_headers=self._headers)

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __contains__(self, item) -> bool:
        return item in self._headers

    def __eq__(self, other) -> bool:
        if isinstance(other, Headers):
            return self._headers == other._headers
        if isinstance(other, Mapping):
            return self._headers == dict(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self._headers)

    def __repr__(self) -> str:
        return f"Headers:\n" + "\n".join(
            (f" {key}: {value}" for key, value in self._headers.items())
        )
