from __future__ import annotations

import logging

from ..context import ActionCtx
from ..lib.layout import ensure_bootstrap_layout

logger = logging.getLogger(__name__)


class PrepareLayoutStep:
    step_id = "20_prepare_layout"

    def run(self, ctx: ActionCtx) -> None:
        ensure_bootstrap_layout(ctx.target_root, dry_run=ctx.dry_run)
        logger.info("Bootstrap layout ready in %s", ctx.target_root)
