from .base import BuilditError
from .parser import UnrecognizedConfiguration
from .parser import UrlParsingError
from .requests import MalformedRequest

__all__ = (
    "BuilditError",
    "MalformedRequest",
    "UnrecognizedConfiguration",
    "UrlParsingError",
)
