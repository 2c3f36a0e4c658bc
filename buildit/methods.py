from enum import Enum


class HttpMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, value) -> "HttpMethod":
        """
        :Example:

        >>> from buildit.methods import HttpMethod
        >>> HttpMethod.parse("post")
        <HttpMethod.POST: 'POST'>
        >>> HttpMethod.parse(HttpMethod.PUT)
        <HttpMethod.PUT: 'PUT'>
        """
        if isinstance(value, cls):
            return value
        return cls(str(value).upper())

    def __str__(self) -> str:
        return self.value


class Scheme(Enum):
    http = "http"
    https = "https"
