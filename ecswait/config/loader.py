import argparse
import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from ecswait.ecs.arn import ArnParseError, task_id_from_arn

from .types import (
    DEFAULT_POLL_INTERVAL_S,
    DEFAULT_TIMEOUT_S,
    AwsContext,
    ConfigError,
    FileDefaults,
    UnsupportedConfigFormatError,
    WaiterConfig,
)

ACCESS_KEY_VAR = "AWS_ACCESS_KEY_ID"
SECRET_KEY_VAR = "AWS_SECRET_ACCESS_KEY"
SESSION_TOKEN_VAR = "AWS_SESSION_TOKEN"
REGION_VARS = ("AWS_REGION", "AWS_DEFAULT_REGION")


def load_config(args: argparse.Namespace, environ: Mapping[str, str]) -> WaiterConfig:
    defaults = FileDefaults()
    if args.config is not None:
        defaults = load_config_file(args.config)

    cluster = _pick(args.cluster, defaults.cluster)
    if cluster is None or len(cluster.strip()) < 1:
        raise ConfigError("Missing required flag: --cluster")

    if args.task is None or len(args.task.strip()) < 1:
        raise ConfigError("Missing required flag: --task")

    task_arn = args.task.strip()
    try:
        task_id_from_arn(task_arn)
    except ArnParseError as exc:
        raise ConfigError(f"--task: {exc}") from exc

    timeout = _pick(args.timeout, defaults.timeout, DEFAULT_TIMEOUT_S)
    if timeout < 1:
        raise ConfigError(f"--timeout must be a positive number of seconds, got {timeout}")

    return WaiterConfig(
        cluster=cluster.strip(),
        task_arn=task_arn,
        aws=_build_aws_context(environ),
        timeout=timeout,
        poll_interval=DEFAULT_POLL_INTERVAL_S,
        verbose=bool(args.verbose),
    )


def _pick(*values: Any) -> Any:
    for value in values:
        if value is not None:
            return value
    return None


def _build_aws_context(environ: Mapping[str, str]) -> AwsContext:
    access_key_id = environ.get(ACCESS_KEY_VAR, "")
    if len(access_key_id) < 1:
        raise ConfigError(f"Missing required environment variable: {ACCESS_KEY_VAR}")

    secret_access_key = environ.get(SECRET_KEY_VAR, "")
    if len(secret_access_key) < 1:
        raise ConfigError(f"Missing required environment variable: {SECRET_KEY_VAR}")

    region = ""
    for var in REGION_VARS:
        region = environ.get(var, "")
        if len(region) > 0:
            break

    if len(region) < 1:
        raise ConfigError(
            f"Missing required environment variable: {' or '.join(REGION_VARS)}"
        )

    session_token = environ.get(SESSION_TOKEN_VAR) or None

    return AwsContext(region, access_key_id, secret_access_key, session_token)


def load_config_file(path: str | Path) -> FileDefaults:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return _build_file_defaults(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    match fmt:
        case "yaml":
            try:
                raw_file = yaml.safe_load(text)
            except yaml.YAMLError as exc:
                raise ConfigError(f"{path}: invalid YAML") from exc
        case "toml":
            try:
                raw_file = tomllib.loads(text)
            except tomllib.TOMLDecodeError as exc:
                raise ConfigError(f"{path}: invalid TOML") from exc
        case "json":
            try:
                raw_file = json.loads(text)
            except json.JSONDecodeError as exc:
                raise ConfigError(f"{path}: invalid JSON") from exc
        case _:
            raise AssertionError("Unreachable")

    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def _build_file_defaults(raw: Mapping[str, Any]) -> FileDefaults:
    keys = {"cluster", "timeout"}

    for key in raw.keys():
        if key not in keys:
            raise ConfigError(f"Can't process: {key}")

    cluster = None
    if "cluster" in raw:
        if not isinstance(raw["cluster"], str):
            raise ConfigError("'cluster' should be a string")

        if len(raw["cluster"].strip()) < 1:
            raise ConfigError("'cluster' can't be empty")

        cluster = raw["cluster"].strip()

    return FileDefaults(
        cluster=cluster,
        timeout=_positive_int(raw, "timeout"),
    )


def _positive_int(raw: Mapping[str, Any], key: str) -> int | None:
    if key not in raw:
        return None

    value = raw[key]
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' should be an integer, got {type(value)}")

    if value < 1:
        raise ConfigError(f"'{key}' must be positive, got {value}")

    return value
