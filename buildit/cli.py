import argparse
import json
import sys
from functools import wraps

import buildit
from buildit.settings import BODY_ENCODING

parser = argparse.ArgumentParser(
    prog="buildit",
    description="Build an HTTP request from a JSON configuration document",
)

parser.add_argument("config", type=str, help="Path to the JSON configuration document")
parser.add_argument("-n", "--name", type=str, help="Request section to apply")
parser.add_argument(
    "-X",
    "--method",
    type=str,
    choices=[method.value for method in buildit.HttpMethod],
    help="HTTP method, overrides the document",
)
parser.add_argument(
    "-H",
    "--header",
    dest="headers",
    type=str,
    action="append",
    help="Extra header as `Key: value`, can be repeated",
)
parser.add_argument(
    "-q",
    "--query",
    type=str,
    action="append",
    help="Extra query item as `name=value`, can be repeated",
)
parser.add_argument("-d", "--data", type=str, help="Request body")
parser.add_argument(
    "-v", "--verbose", action="store_true", help="Show the request headers and body"
)


def preview(func=None, text=""):
    @wraps(func)
    def _inner(*args, **kwargs):
        print(f"REQUEST {text}".center(31, "="))
        return func(*args, **kwargs)

    if func is None:

        def _inner_decorator(fnc):
            nonlocal func
            func = fnc
            return _inner

        return _inner_decorator
    return _inner


@preview(text="HEADERS")
def write_headers(request, /):
    for key, value in request.headers.items():
        print(f"{key}: {value}")


@preview(text="BODY")
def write_body(request, /):
    print(request.body.decode(BODY_ENCODING, errors="replace"))


def load_document(path):
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def apply_arguments(builder, args):
    if args.method:
        builder.method(args.method)

    for raw_header in args.headers or ():
        key, _, value = raw_header.partition(":")
        builder.set_header(value.strip(), key.strip())

    for raw_query in args.query or ():
        name, _, value = raw_query.partition("=")
        builder.query(name, value)

    if args.data is not None:
        builder.body(args.data)
    return builder


def main(argv=None):
    args = parser.parse_args(argv)

    try:
        document = load_document(args.config)
    except (OSError, ValueError) as err:
        print(f"Can't read configuration {args.config}: {err}", file=sys.stderr)
        return 1

    builder = buildit.RequestBuilder().request(args.name, document)
    request = apply_arguments(builder, args).build()

    if request is None:
        print("Configuration doesn't describe a valid request", file=sys.stderr)
        return 1

    print(f"{request.method.value} {request.url}")
    if args.verbose:
        write_headers(request)
        if request.body is not None:
            write_body(request)
    return 0


if __name__ == "__main__":
    sys.exit(main())
