from .arn import ArnParseError, task_id_from_arn
from .client import EcsTaskClient, make_ecs_client
from .types import EcsApiError, TaskFailure, TaskStatus

__all__ = [
    "ArnParseError",
    "task_id_from_arn",
    "EcsTaskClient",
    "make_ecs_client",
    "EcsApiError",
    "TaskFailure",
    "TaskStatus",
]
