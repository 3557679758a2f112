from __future__ import annotations

import argparse
from typing import NoReturn

from ecswait.config import UsageError


class _Parser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="ecswait",
        description="Wait for a one-off ECS task to finish, then print its logs.",
        allow_abbrev=False,
    )

    parser.add_argument(
        "--cluster",
        help="ECS cluster name",
    )
    parser.add_argument(
        "--task",
        metavar="ARN",
        help="ARN of the task to monitor",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        metavar="SECONDS",
        help="Overall polling deadline (default: 90)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        "--debug",
        dest="verbose",
        action="store_true",
        help="Trace every external command to stderr",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Optional .yml/.yaml, .toml or .json file with defaults",
    )

    return parser
