from enum import IntEnum


class ExitCode(IntEnum):
    USAGE = 1
    CONFIG = 2
    TIMED_OUT = 3
    DEPENDENCY_MISSING = 4
    TASK_FAILED = 9
    INTERRUPTED = 130
    API_ERROR = 255
