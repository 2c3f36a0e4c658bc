from .base import BuilditError
from .requests import MalformedRequest


class UrlParsingError(MalformedRequest):
    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super(UrlParsingError, self).__init__(f"Can't compose url {url!r}: {reason}")


class UnrecognizedConfiguration(BuilditError):
    def __init__(self, key: str, value):
        self.key = key
        self.value = value
        super(UnrecognizedConfiguration, self).__init__(
            f"Ignoring `{key}`, unexpected {type(value).__name__} value"
        )
