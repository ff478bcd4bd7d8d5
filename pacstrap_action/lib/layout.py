from __future__ import annotations

import logging
from pathlib import Path

from ..errors import DirectoryCreateError

logger = logging.getLogger(__name__)

# pacman-key refuses to run unless these exist inside the target root.
LAYOUT_DIRS = (
    "var/lib/pacman",
    "etc/pacman.d/gnupg",
)


def ensure_bootstrap_layout(target_root: str, *, dry_run: bool = False) -> list[Path]:
    created: list[Path] = []
    for rel in LAYOUT_DIRS:
        p = Path(target_root) / rel
        if dry_run:
            logger.info("Would create %s", p)
            continue
        try:
            p.mkdir(mode=0o755, parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateError(f"Couldn't create {rel} in image: {e}", cause=e) from e
        created.append(p)
    return created
