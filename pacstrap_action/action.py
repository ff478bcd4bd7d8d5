from __future__ import annotations

import logging

from .action_config import ActionConfig
from .context import ActionCtx, ExecutionContext
from .pipeline import PipelineResult, run_pipeline
from .steps import (
    CleanupConfigStep,
    InitKeyringStep,
    InstallPackagesStep,
    PrepareLayoutStep,
    WriteConfigStep,
)

logger = logging.getLogger(__name__)


def build_steps():
    return [
        WriteConfigStep(),
        PrepareLayoutStep(),
        InitKeyringStep(),
        InstallPackagesStep(),
        CleanupConfigStep(),
    ]


def run_action(
    action: ActionConfig,
    context: ExecutionContext,
    *,
    dry_run: bool = False,
) -> PipelineResult:
    """Provision context.rootdir with pacstrap.

    Raises the failing step's error; a failed run leaves the target root and
    the scratch pacman.conf as the last successful step left them.
    """

    if action.description:
        logger.info("Running pacstrap action: %s", action.description)
    else:
        logger.info("Running pacstrap action")

    ctx = ActionCtx(action=action, context=context, dry_run=dry_run)
    result = run_pipeline(ctx=ctx, steps=build_steps())
    if result.error is not None:
        raise result.error
    return result
