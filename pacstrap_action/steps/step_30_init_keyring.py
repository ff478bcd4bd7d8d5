from __future__ import annotations

import logging

from ..context import ActionCtx
from ..lib.keyring import pacman_key_init, pacman_key_populate

logger = logging.getLogger(__name__)


class InitKeyringStep:
    step_id = "30_init_keyring"

    def run(self, ctx: ActionCtx) -> None:
        # populate needs an initialized keyring; a failed init raises before it.
        pacman_key_init(ctx.config_path, dry_run=ctx.dry_run)
        pacman_key_populate(ctx.config_path, dry_run=ctx.dry_run)
