from __future__ import annotations

import logging
import sys

from mdrelink.cli.handlers import (
    EXIT_CONFIG,
    EXIT_ISSUES,
    handle_check,
    handle_config_show,
)
from mdrelink.cli.parser import build_parser
from mdrelink.errors import ConfigValidationError, MdRelinkError, ScanRootNotFoundError


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        if args.command == "check":
            return handle_check(args)
        if args.command == "config" and args.config_command == "show":
            return handle_config_show(args)
    except ScanRootNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_CONFIG
    except ConfigValidationError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_CONFIG
    except MdRelinkError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_ISSUES

    parser.error("unhandled command")
    return EXIT_ISSUES


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
