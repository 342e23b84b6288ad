from __future__ import annotations

import argparse

from mdrelink.__about__ import __version__

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdrelink",
        description="Validate and repair relative links in markdown documentation",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity on stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    check_parser = sub.add_parser("check", help="Validate relative links under a directory")
    check_parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to scan (defaults to the configured root)",
    )
    check_parser.add_argument(
        "--write",
        action="store_true",
        help="Rewrite auto-fixable links in place",
    )
    check_parser.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Emit the run result as JSON",
    )
    check_parser.add_argument("--config", dest="config_path", default=None)

    config_parser = sub.add_parser("config", help="Link-check config operations")
    config_sub = config_parser.add_subparsers(dest="config_command", required=True)
    config_show = config_sub.add_parser("show", help="Print the resolved configuration")
    config_show.add_argument("--config", dest="config_path", default=None)

    return parser
