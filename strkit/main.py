"""strkit CLI - run one string operation and print the result envelope as JSON.

Usage:
    strkit OPERATION [key=value ...] [key:=json ...]
    strkit --list

Invariants:
    - key=value always passes a string; key:=value passes a parsed JSON literal
    - stdout carries only the JSON envelope; logs go to stderr
    - Exit codes: 0 ok envelope, 1 error envelope, 2 usage error

Design Decisions:
    - Logging configured once here from Settings, never on library import
"""

import argparse
import json
import logging
import sys

from strkit.config import get_settings
from strkit.infrastructure.observability import setup_logging
from strkit.services.operation_dispatch import OperationDispatch

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


def parse_assignment(token: str) -> tuple[str, object]:
    """Split "key=value" / "key:=json" into (key, value).

    Raises ValueError on malformed tokens or invalid JSON.
    """
    eq = token.find("=")
    if eq == -1:
        raise ValueError(f"expected key=value or key:=json, got '{token}'")
    if eq > 0 and token[eq - 1] == ":":
        key, raw = token[:eq - 1], token[eq + 1:]
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ValueError(f"invalid JSON for '{key}': {exc.msg}") from exc
    else:
        key, value = token[:eq], token[eq + 1:]
    if not key:
        raise ValueError(f"missing argument name in '{token}'")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strkit", description="Run a strkit string operation.",
    )
    parser.add_argument("operation", nargs="?", help="operation name, e.g. slugify")
    parser.add_argument(
        "arguments", nargs="*", metavar="key=value",
        help="string argument (key=value) or JSON argument (key:=json)",
    )
    parser.add_argument("--list", action="store_true", help="list operations and exit")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    dispatch = OperationDispatch(settings)

    if args.list:
        print("\n".join(dispatch.operations()))
        return EXIT_OK
    if not args.operation:
        parser.print_usage(sys.stderr)
        return EXIT_USAGE

    arguments: dict[str, object] = {}
    for token in args.arguments:
        try:
            key, value = parse_assignment(token)
        except ValueError as exc:
            print(f"strkit: {exc}", file=sys.stderr)
            return EXIT_USAGE
        arguments[key] = value

    logger.debug(f"Dispatching {args.operation}", extra={"operation": args.operation})
    envelope = dispatch.execute(args.operation, arguments)
    print(json.dumps(envelope, ensure_ascii=False))
    return EXIT_OK if envelope["status"] == "ok" else EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
