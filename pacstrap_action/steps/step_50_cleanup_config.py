from __future__ import annotations

import logging

from ..context import ActionCtx

logger = logging.getLogger(__name__)


class CleanupConfigStep:
    step_id = "50_cleanup_config"

    def run(self, ctx: ActionCtx) -> None:
        # Cleanup is advisory: never fail the action over it.
        try:
            ctx.config_path.unlink()
        except OSError as e:
            logger.warning("Couldn't remove pacman config %s: %s", ctx.config_path, e)
            return
        logger.info("Removed pacman config %s", ctx.config_path)
