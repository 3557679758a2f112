import re

# arn:<partition>:ecs:<region>:<account>:task/[<cluster>/]<task-id>
_TASK_ARN_RE = re.compile(
    r"^arn:aws[a-z-]*:ecs:[a-z0-9-]+:\d{12}:task/(?:[A-Za-z0-9_-]+/)?[A-Za-z0-9_-]+$"
)


class ArnParseError(ValueError):
    def __init__(self, arn: str):
        super().__init__(f"not an ECS task ARN: {arn!r}")
        self.arn = arn


def task_id_from_arn(arn: str) -> str:
    """Return the task id, the segment after the last ``/`` of an ECS task ARN.

    Raises ArnParseError when ``arn`` does not have the shape
    ``arn:<partition>:ecs:<region>:<account>:task/[<cluster>/]<id>``.
    """
    if not _TASK_ARN_RE.match(arn):
        raise ArnParseError(arn)

    return arn.rsplit("/", 1)[-1]
