from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .types import EcsApiError, TaskStatus

if TYPE_CHECKING:
    from ecswait.config.types import AwsContext

logger = logging.getLogger(__name__)


def make_ecs_client(aws: AwsContext) -> Any:
    return boto3.client(
        "ecs",
        region_name=aws.region,
        aws_access_key_id=aws.access_key_id,
        aws_secret_access_key=aws.secret_access_key,
        aws_session_token=aws.session_token,
    )


class EcsTaskClient:
    def __init__(self, client: Any, cluster: str, task_arn: str):
        self.client = client
        self.cluster = cluster
        self.task_arn = task_arn

    def describe(self) -> TaskStatus:
        logger.debug(
            "+ ecs describe_tasks --cluster %s --tasks %s", self.cluster, self.task_arn
        )
        try:
            response = self.client.describe_tasks(
                cluster=self.cluster, tasks=[self.task_arn]
            )
        except (ClientError, BotoCoreError) as exc:
            raise EcsApiError(f"describe_tasks failed: {exc}") from exc

        return TaskStatus.from_response(response)
