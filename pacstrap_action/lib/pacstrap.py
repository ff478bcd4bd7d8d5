from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from ..errors import CommandError, PackageInstallError
from .command import run_cmd

logger = logging.getLogger(__name__)

PACMAN_LOG = "var/log/pacman.log"


def pacstrap_argv(config_path: Path, target_root: str, packages: Sequence[str]) -> list[str]:
    """-G skips copying the host keyring, -M skips the host mirrorlist."""

    return ["pacstrap", "-GM", "-C", str(config_path), target_root, *packages]


def dump_pacman_log(target_root: str) -> bool:
    """Show the target's pacman.log, if there is one. Never raises."""

    log = Path(target_root) / PACMAN_LOG
    try:
        text = log.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        logger.debug("No pacman log to show (%s): %s", log, e)
        return False
    for line in text.splitlines():
        logger.error("pacstrap.log | %s", line)
    return True


def run_pacstrap(
    config_path: Path,
    target_root: str,
    packages: Sequence[str],
    *,
    dry_run: bool = False,
) -> None:
    try:
        run_cmd(pacstrap_argv(config_path, target_root, packages), label="Pacstrap", dry_run=dry_run)
    except CommandError as e:
        dump_pacman_log(target_root)
        raise PackageInstallError(f"Couldn't install packages with pacstrap: {e}", cause=e) from e
