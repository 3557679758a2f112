from .fetcher import LOG_TOOL, LogFetcher, require_tool
from .types import LogToolError, ToolMissingError

__all__ = ["LOG_TOOL", "LogFetcher", "require_tool", "LogToolError", "ToolMissingError"]
