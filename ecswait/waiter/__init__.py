from .types import WaitOutcome, WaitResult
from .waiter import TaskWaiter

__all__ = ["TaskWaiter", "WaitOutcome", "WaitResult"]
