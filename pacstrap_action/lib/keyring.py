from __future__ import annotations

import logging
from pathlib import Path

from ..errors import CommandError, KeyringInitError, KeyringPopulateError
from .command import run_cmd

logger = logging.getLogger(__name__)


def pacman_key_argv(config_path: Path, subcommand: str) -> list[str]:
    return ["pacman-key", "--nocolor", "--config", str(config_path), subcommand]


def pacman_key_init(config_path: Path, *, dry_run: bool = False) -> None:
    try:
        run_cmd(pacman_key_argv(config_path, "--init"), label="Pacman-key", dry_run=dry_run)
    except CommandError as e:
        raise KeyringInitError(f"Couldn't init pacman keyring: {e}", cause=e) from e


def pacman_key_populate(config_path: Path, *, dry_run: bool = False) -> None:
    try:
        run_cmd(pacman_key_argv(config_path, "--populate"), label="Pacman-key", dry_run=dry_run)
    except CommandError as e:
        raise KeyringPopulateError(f"Couldn't populate pacman keyring: {e}", cause=e) from e
