import logging
import shlex
import shutil
import subprocess
from typing import TextIO

from .types import LogToolError, ToolMissingError

logger = logging.getLogger(__name__)

LOG_TOOL = "ecs-cli"


def require_tool(name: str = LOG_TOOL) -> str:
    path = shutil.which(name)
    if path is None:
        raise ToolMissingError(name)
    return path


class LogFetcher:
    def __init__(self, tool_path: str, region: str, cluster: str):
        self.tool_path = tool_path
        self.region = region
        self.cluster = cluster

    def command(self, task_id: str) -> list[str]:
        return [
            self.tool_path,
            "logs",
            "--task-id",
            task_id,
            "--region",
            self.region,
            "--cluster",
            self.cluster,
        ]

    def stream(self, task_id: str, out: TextIO) -> None:
        cmd = self.command(task_id)
        logger.debug("+ %s", shlex.join(cmd))

        try:
            proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, text=True)
        except OSError as exc:
            raise ToolMissingError(self.tool_path) from exc

        with proc:
            for line in proc.stdout:
                out.write(line)
                out.flush()
            returncode = proc.wait()

        if returncode != 0:
            raise LogToolError(cmd, returncode)
