from .base import BuilditError


class MalformedRequest(BuilditError):
    """
    The accumulated state can't be resolved into an absolute URL.

    Never leaves `RequestBuilder.build`, which reports it as `None`.
    """
