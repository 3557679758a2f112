import logging
import time
from typing import Callable

from ecswait.config import WaiterConfig
from ecswait.ecs import EcsTaskClient

from .types import WaitOutcome, WaitResult

logger = logging.getLogger(__name__)


class TaskWaiter:
    def __init__(
        self,
        config: WaiterConfig,
        ecs: EcsTaskClient,
        sleep: Callable[[float], None] | None = None,
    ):
        self.config = config
        self.ecs = ecs
        self._sleep = sleep or time.sleep

    def wait(self) -> WaitResult:
        # elapsed is a nominal counter of poll intervals, not wall-clock time
        elapsed = 0
        polls = 0
        status = None

        while elapsed < self.config.timeout:
            status = self.ecs.describe()
            polls += 1
            logger.debug(
                "poll %d at %ds: status=%s exit_code=%s",
                polls,
                elapsed,
                status.last_status,
                status.exit_code,
            )

            if status.failed:
                return WaitResult(WaitOutcome.FAILED, polls, elapsed, status)
            if status.finished:
                return WaitResult(WaitOutcome.SUCCEEDED, polls, elapsed, status)

            self._sleep(self.config.poll_interval)
            elapsed += self.config.poll_interval

        return WaitResult(WaitOutcome.TIMED_OUT, polls, elapsed, status)
