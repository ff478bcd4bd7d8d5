"""Shared test fixtures."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

import pytest

from pacstrap_action.action_config import ActionConfig, Repository
from pacstrap_action.context import ExecutionContext


class FakePopen:
    def __init__(self, returncode: int, output: str) -> None:
        self.returncode = returncode
        self.stdout = io.StringIO(output)

    def __enter__(self) -> "FakePopen":
        return self

    def __exit__(self, *exc) -> None:
        self.stdout.close()

    def wait(self) -> int:
        return self.returncode


@dataclass
class CommandRecorder:
    """Stands in for subprocess.Popen; exit codes are scripted per argv prefix."""

    calls: List[List[str]] = field(default_factory=list)
    failures: Dict[tuple, int] = field(default_factory=dict)
    hooks: Dict[str, object] = field(default_factory=dict)

    def fail(self, *prefix: str, returncode: int = 1) -> None:
        self.failures[prefix] = returncode

    def programs(self) -> List[str]:
        return [c[0] for c in self.calls]

    def __call__(self, argv, **kwargs) -> FakePopen:
        argv = list(argv)
        self.calls.append(argv)
        hook = self.hooks.get(argv[0])
        if hook is not None:
            hook(argv)
        for prefix, code in self.failures.items():
            if tuple(argv[: len(prefix)]) == prefix:
                return FakePopen(returncode=code, output=f"{argv[0]}: failed\n")
        return FakePopen(returncode=0, output=f"{argv[0]}: ok\n")


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> CommandRecorder:
    rec = CommandRecorder()
    monkeypatch.setattr("pacstrap_action.lib.command.subprocess.Popen", rec)
    return rec


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)


@pytest.fixture
def context(tmp_path: Path) -> ExecutionContext:
    rootdir = tmp_path / "root"
    scratchdir = tmp_path / "scratch"
    recipedir = tmp_path / "recipe"
    for d in (rootdir, scratchdir, recipedir):
        d.mkdir()
    return ExecutionContext(rootdir=str(rootdir), scratchdir=str(scratchdir), recipedir=str(recipedir))


@pytest.fixture
def core_action() -> ActionConfig:
    return ActionConfig(
        repositories=(Repository(name="core", server="http://mirror.example/core"),),
        packages=("base", "linux"),
    )
