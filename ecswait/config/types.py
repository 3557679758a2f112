from dataclasses import dataclass, field

DEFAULT_TIMEOUT_S = 90
DEFAULT_POLL_INTERVAL_S = 5


@dataclass(frozen=True)
class AwsContext:
    region: str
    access_key_id: str = field(repr=False)
    secret_access_key: str = field(repr=False)
    session_token: str | None = field(default=None, repr=False)


@dataclass(frozen=True)
class WaiterConfig:
    cluster: str
    task_arn: str
    aws: AwsContext
    timeout: int = DEFAULT_TIMEOUT_S
    poll_interval: int = DEFAULT_POLL_INTERVAL_S
    verbose: bool = False


@dataclass(frozen=True)
class FileDefaults:
    cluster: str | None = None
    timeout: int | None = None


class UsageError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
