from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .action_config import ActionConfig
from .lib.pacman_conf import CONFIG_FILENAME


@dataclass(frozen=True)
class ExecutionContext:
    """Paths handed to the action by the surrounding pipeline."""

    rootdir: str
    scratchdir: str
    recipedir: str


@dataclass(frozen=True)
class ActionCtx:
    action: ActionConfig
    context: ExecutionContext
    dry_run: bool = False

    @property
    def target_root(self) -> str:
        return self.context.rootdir

    @property
    def config_path(self) -> Path:
        return Path(self.context.scratchdir) / CONFIG_FILENAME

    @property
    def override_path(self) -> Path | None:
        if not self.action.config:
            return None
        return Path(self.context.recipedir) / self.action.config
