from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)

# Lines of output quoted in a CommandError message.
ERROR_TAIL_LINES = 20


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def _tail(text: str, n: int = ERROR_TAIL_LINES) -> str:
    return "\n".join(text.splitlines()[-n:])


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    label: Optional[str] = None,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command to completion, streaming its output into the log.

    - Always logs the command.
    - stdout and stderr are merged and logged line by line as they arrive:
      at INFO under the label when one is given, at DEBUG otherwise.
    - Output is decoded as UTF-8; undecodable bytes are replaced.
    - check=True raises CommandError on a non-zero exit.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, output="")

    lines: list[str] = []
    try:
        with subprocess.Popen(
            argv_list,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        ) as p:
            for line in p.stdout:
                line = line.rstrip("\n")
                lines.append(line)
                if label is None:
                    logger.debug("OUTPUT %s", line)
                else:
                    logger.info("%s | %s", label, line)
            returncode = p.wait()
    except FileNotFoundError as e:
        # Missing executable; report it the way a shell would.
        lines.append(str(e))
        returncode = 127

    result = CmdResult(argv=argv_list, returncode=returncode, output="\n".join(lines))

    if check and result.returncode != 0:
        raise CommandError(
            f"Command failed ({result.returncode}): {_fmt_argv(argv_list)}\n{_tail(result.output)}".rstrip(),
            argv=argv_list,
            returncode=result.returncode,
            output=result.output,
        )

    return result
