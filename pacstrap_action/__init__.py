"""Pacstrap action: provision a target root with pacman's bootstrap tooling.

Core design goals:
- Generated pacman.conf from declared repositories (or a caller override)
- Fixed, ordered step sequence that stops at the first failure
- External tools invoked through one logged command primitive
- Best-effort diagnostics that never mask the primary error
"""

from .action import run_action
from .action_config import ActionConfig, Repository
from .context import ExecutionContext

__all__ = ["ActionConfig", "ExecutionContext", "Repository", "run_action"]
