class ToolMissingError(Exception):
    def __init__(self, tool: str):
        super().__init__(f"Required tool not found on PATH: {tool}")
        self.tool = tool


class LogToolError(Exception):
    def __init__(self, command: list[str], returncode: int):
        super().__init__(
            f"{' '.join(command)} exited with status {returncode}"
        )
        self.command = command
        self.returncode = returncode

    @property
    def exit_status(self) -> int:
        # Popen reports death by signal N as -N; shells report 128 + N
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode
