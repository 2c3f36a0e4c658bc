__version__ = "1.0.0"

from .builder import RequestBuilder
from .document import Document
from .errors import BuilditError
from .errors import MalformedRequest
from .errors import UnrecognizedConfiguration
from .errors import UrlParsingError
from .headers import Headers
from .methods import HttpMethod
from .methods import Scheme
from .request import RequestDescriptor
from .urls import Url
from .urls import compose_url
from .urls import parse_url

__all__ = (
    "BuilditError",
    "Document",
    "Headers",
    "HttpMethod",
    "MalformedRequest",
    "RequestBuilder",
    "RequestDescriptor",
    "Scheme",
    "UnrecognizedConfiguration",
    "Url",
    "UrlParsingError",
    "compose_url",
    "parse_url",
)
