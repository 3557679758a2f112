from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

from ecswait.config import ConfigError, UsageError, WaiterConfig, load_config
from ecswait.ecs import (
    EcsApiError,
    EcsTaskClient,
    TaskStatus,
    make_ecs_client,
    task_id_from_arn,
)
from ecswait.logs import LogFetcher, LogToolError, ToolMissingError, require_tool
from ecswait.waiter import TaskWaiter, WaitOutcome, WaitResult

from .args import build_parser
from .exit_codes import ExitCode

LOGS_BANNER = "## LOGS ##"
LOGS_FOOTER = "##########"


def run_cli(
    argv: list[str] | None = None, environ: Mapping[str, str] | None = None
) -> int:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    parser = build_parser()
    try:
        tool_path = require_tool()

        if len(argv) == 0:
            parser.print_help(sys.stdout)
            return ExitCode.USAGE

        args = parser.parse_args(argv)
        config = load_config(args, environ)
        _configure_logging(config.verbose)
        return cmd_wait(config, tool_path)

    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        parser.print_help(sys.stdout)
        return ExitCode.USAGE

    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return ExitCode.CONFIG

    except ToolMissingError as exc:
        print(str(exc), file=sys.stderr)
        return ExitCode.DEPENDENCY_MISSING

    except EcsApiError as exc:
        print(str(exc), file=sys.stderr)
        return ExitCode.API_ERROR

    except LogToolError as exc:
        print(str(exc), file=sys.stderr)
        return exc.exit_status

    except KeyboardInterrupt:
        return ExitCode.INTERRUPTED


def main() -> None:
    raise SystemExit(run_cli())


def cmd_wait(config: WaiterConfig, tool_path: str) -> int:
    ecs = EcsTaskClient(
        make_ecs_client(config.aws), config.cluster, config.task_arn
    )
    result = TaskWaiter(config, ecs).wait()

    match result:
        case WaitResult(outcome=WaitOutcome.FAILED, status=TaskStatus() as status):
            _print_failures(status)
            return ExitCode.TASK_FAILED
        case WaitResult(
            outcome=WaitOutcome.SUCCEEDED, status=TaskStatus(exit_code=int() as code)
        ):
            fetcher = LogFetcher(tool_path, config.aws.region, config.cluster)
            return _report_success(config, code, fetcher)
        case WaitResult(outcome=WaitOutcome.TIMED_OUT):
            print(
                f"Timed out after {config.timeout}s waiting for task {config.task_arn}",
                file=sys.stderr,
            )
            return ExitCode.TIMED_OUT
        case _:
            raise AssertionError("Unreachable")


def _print_failures(status: TaskStatus) -> None:
    print("Task failed:")
    for failure in status.failures:
        print(f"  {failure.describe()}")


def _report_success(config: WaiterConfig, exit_code: int, fetcher: LogFetcher) -> int:
    print(f"Task {config.task_arn} finished with exit code {exit_code}")

    task_id = task_id_from_arn(config.task_arn)
    print(LOGS_BANNER, flush=True)
    fetcher.stream(task_id, sys.stdout)
    print(LOGS_FOOTER)

    return exit_code



def _configure_logging(verbose: bool) -> None:
    logger = logging.getLogger("ecswait")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
