from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Sequence

from ..action_config import Repository
from ..errors import ConfigCopyError, ConfigWriteError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "pacman.conf"

# pacman parses this line by line; keys, order and tokens must stay as-is.
OPTIONS_SECTION = """
[options]
RootDir  = {root}
CacheDir = {root}/var/cache/pacman/pkg/
GPGDir   = {root}/etc/pacman.d/gnupg/
HookDir  = {root}/etc/pacman.d/hooks/
HoldPkg  = pacman glibc
Architecture = auto
Color
CheckSpace
SigLevel = Required DatabaseOptional TrustAll
"""

REPO_SECTION = """

[{name}]
Server = {server}
"""


def render_pacman_conf(target_root: str, repositories: Sequence[Repository]) -> str:
    """Render pacman.conf text: the options block, then one section per repository.

    Repository order is kept; pacman resolves packages in section order.
    """

    parts = [OPTIONS_SECTION.format(root=target_root)]
    for repo in repositories:
        parts.append(REPO_SECTION.format(name=repo.name, server=repo.server))
    return "".join(parts)


def write_pacman_conf(config_path: Path, target_root: str, repositories: Sequence[Repository]) -> None:
    text = render_pacman_conf(target_root, repositories)
    try:
        config_path.write_text(text, encoding="utf-8")
    except OSError as e:
        raise ConfigWriteError(f"Couldn't write pacman config: {e}", cause=e) from e
    logger.info("Wrote pacman config %s (%d repositories)", config_path, len(repositories))


def copy_override_conf(src: Path, config_path: Path) -> None:
    """Replace the generated config with a caller-authored one, byte for byte."""

    try:
        shutil.copyfile(src, config_path)
        config_path.chmod(0o644)
    except OSError as e:
        raise ConfigCopyError(
            f"Couldn't copy pacman config: {e}",
            hint="config is resolved relative to the recipe directory",
            cause=e,
        ) from e
    logger.info("Using pacman config override %s", src)
