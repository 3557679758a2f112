from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Mapping

_DIGITS_RE = re.compile(r"^[0-9]+$")


@dataclass(frozen=True)
class TaskFailure:
    arn: str | None
    reason: str | None
    detail: str | None

    def describe(self) -> str:
        text = self.reason or "unknown reason"
        if self.detail:
            text = f"{text}: {self.detail}"
        if self.arn:
            text = f"{text} ({self.arn})"
        return text


@dataclass(frozen=True)
class TaskStatus:
    failures: tuple[TaskFailure, ...]
    exit_code: int | None
    task_arn: str | None = None
    last_status: str | None = None

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> TaskStatus:
        failures = tuple(
            TaskFailure(item.get("arn"), item.get("reason"), item.get("detail"))
            for item in response.get("failures") or []
        )

        tasks = response.get("tasks") or []
        if len(tasks) < 1:
            return cls(failures, None)

        task = tasks[0]
        containers = task.get("containers") or []
        exit_code = None
        if len(containers) > 0:
            exit_code = _parse_exit_code(containers[0].get("exitCode"))

        return cls(failures, exit_code, task.get("taskArn"), task.get("lastStatus"))

    @property
    def failed(self) -> bool:
        return len(self.failures) > 0

    @property
    def finished(self) -> bool:
        return self.exit_code is not None


def _parse_exit_code(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str) and _DIGITS_RE.match(value):
        return int(value)
    return None


class EcsApiError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
