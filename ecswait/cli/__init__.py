from .commands import main, run_cli
from .exit_codes import ExitCode

__all__ = ["main", "run_cli", "ExitCode"]
