from dataclasses import dataclass
from enum import Enum, auto

from ecswait.ecs.types import TaskStatus


class WaitOutcome(Enum):
    FAILED = auto()
    SUCCEEDED = auto()
    TIMED_OUT = auto()


@dataclass(frozen=True)
class WaitResult:
    outcome: WaitOutcome
    polls: int
    elapsed_s: int
    status: TaskStatus | None
