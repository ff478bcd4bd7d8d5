from __future__ import annotations

import logging

from ..context import ActionCtx
from ..lib.pacstrap import run_pacstrap

logger = logging.getLogger(__name__)


class InstallPackagesStep:
    step_id = "40_install_packages"

    def run(self, ctx: ActionCtx) -> None:
        packages = ctx.action.packages
        run_pacstrap(ctx.config_path, ctx.target_root, packages, dry_run=ctx.dry_run)
        logger.info("Rootfs installed at %s (%d extra packages)", ctx.target_root, len(packages))
