from __future__ import annotations

import logging

from ..context import ActionCtx
from ..lib.pacman_conf import copy_override_conf, write_pacman_conf

logger = logging.getLogger(__name__)


class WriteConfigStep:
    step_id = "10_write_config"

    def run(self, ctx: ActionCtx) -> None:
        write_pacman_conf(ctx.config_path, ctx.target_root, ctx.action.repositories)

        # An override replaces the generated file wholesale; nothing is merged.
        override = ctx.override_path
        if override is not None:
            copy_override_conf(override, ctx.config_path)
