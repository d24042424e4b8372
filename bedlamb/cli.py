#!/usr/bin/env python3
"""
bedlamb: invoke a Lambda function as if API Gateway called it.

Builds an API Gateway proxy event from curl-like flags, invokes the function
synchronously and prints the (pretty-printed) response on stdout.

Usage:
    bedlamb -X POST --path /api/users -d '{"name":"John"}' \\
        arn:aws:lambda:us-east-1:123456789012:function:my-function

Set AWS_ENDPOINT=http://localhost:4566 to target LocalStack.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional

from bedlamb import __version__
from bedlamb.config import Settings
from bedlamb.errors import (
    BedlambError,
    ConfigError,
    FunctionError,
    InvocationError,
    SerializationError,
)
from bedlamb.event_factory import make_apigw_event
from bedlamb.formatter import format_request, write_response
from bedlamb.invoker import Invoker, LambdaInvoker
from bedlamb.log import LOGGER_NAME, configure_logging

logger = logging.getLogger(LOGGER_NAME)

EXAMPLE = (
    "Example:\n"
    "  %(prog)s -X POST --path /api/users -d '{\"name\":\"John\"}' "
    "arn:aws:lambda:us-east-1:123456789012:function:my-function"
)

ERROR_PREFIXES = {
    SerializationError: "Error marshaling request",
    ConfigError: "Error loading AWS config",
    InvocationError: "Error invoking Lambda",
}


class ArgumentParser(argparse.ArgumentParser):
    """argparse with exit code 1 on usage errors."""

    def error(self, message):
        self.exit(1, f"Error: {message}\n\n{self.format_help()}")


def build_parser() -> ArgumentParser:
    p = ArgumentParser(
        prog="bedlamb",
        description="Invoke a Lambda function with a synthetic API Gateway proxy event.",
        epilog=EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-X", "--method", default="GET", help="HTTP method")
    p.add_argument("-p", "--path", default="/", help="Request path")
    p.add_argument("-H", "--headers", default="", help="Headers in format 'Key1:Value1,Key2:Value2'")
    p.add_argument("-d", "--data", default="", help="Request body data")
    p.add_argument(
        "-q",
        "--query",
        default="",
        help="Query string parameters in format 'key1=value1,key2=value2'",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    p.add_argument("--version", action="version", version=__version__, help="Show version and exit")
    p.add_argument("--region", default=None, help="AWS region (overrides AWS_REGION / REGION)")
    p.add_argument("--endpoint-url", default=None, help="Lambda endpoint (overrides AWS_ENDPOINT)")
    p.add_argument("function", nargs="?", metavar="lambda-arn", help="Function name or ARN")
    return p


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = build_parser()
    args = p.parse_args(argv)
    if not args.function:
        p.error("Lambda ARN is required")
    return args


def parse_pairs(raw: str, separator: str) -> Dict[str, str]:
    """Split 'k<sep>v,k<sep>v' into a dict; entries without the separator are dropped."""
    pairs: Dict[str, str] = {}
    if not raw:
        return pairs
    for entry in raw.split(","):
        key, sep, value = entry.strip().partition(separator)
        if not sep:
            logger.info("ignoring %r: missing %r", entry, separator)
            continue
        pairs[key.strip()] = value.strip()
    return pairs


def parse_headers(raw: str) -> Dict[str, str]:
    return parse_pairs(raw, ":")


def parse_query(raw: str) -> Dict[str, str]:
    return parse_pairs(raw, "=")


def run(args: argparse.Namespace, invoker: Optional[Invoker] = None) -> int:
    request = make_apigw_event(
        args.method,
        args.path,
        body=args.data,
        headers=parse_headers(args.headers),
        query=parse_query(args.query),
    )
    payload = request.to_json()

    logger.info("Lambda ARN: %s", args.function)
    logger.info("Request payload:\n%s\n", format_request(payload))
    logger.info("Invoking Lambda...\n")

    if invoker is None:
        settings = Settings.from_env().override(
            endpoint_url=args.endpoint_url,
            region=args.region,
        )
        invoker = LambdaInvoker.from_settings(settings)

    result = invoker.invoke(args.function, payload)
    if result.function_error:
        raise FunctionError(result.function_error, result.payload)

    logger.info("Status code: %d", result.status_code)
    logger.info("Response:")
    write_response(result.payload)
    return 0


def main(argv: Optional[List[str]] = None, invoker: Optional[Invoker] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args, invoker)
    except FunctionError as exc:
        logger.error("Lambda function error: %s", exc.error)
        logger.error("Response: %s", exc.payload.decode("utf-8", errors="replace"))
    except BedlambError as exc:
        prefix = ERROR_PREFIXES.get(type(exc), "Error")
        logger.error("%s: %s", prefix, exc)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
