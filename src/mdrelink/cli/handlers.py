from __future__ import annotations

import argparse
import json

from mdrelink.config import load_check_config
from mdrelink.report import format_console_report, format_json_report
from mdrelink.runtime import LinkCheckRuntime

EXIT_OK = 0
EXIT_ISSUES = 1
EXIT_CONFIG = 2


def handle_check(args: argparse.Namespace) -> int:
    runtime = LinkCheckRuntime.from_configs(args.config_path, args.path)
    result = runtime.run(write=args.write)
    if args.json_output:
        print(format_json_report(result))
    else:
        print(format_console_report(result))
    return EXIT_OK if result.ok else EXIT_ISSUES


def handle_config_show(args: argparse.Namespace) -> int:
    config = load_check_config(args.config_path)
    print(json.dumps(config.model_dump(mode="json"), indent=2, sort_keys=True))
    return EXIT_OK
