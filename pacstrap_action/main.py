from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

from .action import run_action
from .action_config import load_action_config
from .context import ExecutionContext
from .errors import PacstrapActionError
from .logging_utils import configure_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="pacstrap-action")
    p.add_argument("--recipe", required=True, help="YAML recipe or bare pacstrap action record")
    p.add_argument("--rootdir", required=True, help="Target root to provision")
    p.add_argument("--scratchdir", required=True, help="Writable scratch directory for pacman.conf")
    p.add_argument("--recipedir", default=None, help="Base for the 'config' path (default: recipe's directory)")
    p.add_argument("--log", default=None, help="Also write a DEBUG-level transcript to this file")
    p.add_argument("--dry-run", action="store_true", help="Log external commands without running them")
    p.add_argument("--verbose", action="store_true", help="Show DEBUG output, including unlabeled command output, on the console")

    args = p.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_path=args.log)

    recipedir = args.recipedir or str(Path(args.recipe).resolve().parent)
    context = ExecutionContext(rootdir=args.rootdir, scratchdir=args.scratchdir, recipedir=recipedir)

    try:
        action = load_action_config(args.recipe)
        result = run_action(action, context, dry_run=bool(args.dry_run))
    except PacstrapActionError as e:
        logger.error("Pacstrap action failed: %s", e)
        return 1

    logger.info("Pacstrap action done (%s)", ", ".join(result.ran_steps))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
