from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from .errors import RecipeError

ACTION_NAME = "pacstrap"


@dataclass(frozen=True)
class Repository:
    name: str
    server: str


@dataclass(frozen=True)
class ActionConfig:
    """Declared state of one pacstrap action record."""

    repositories: Tuple[Repository, ...] = ()
    packages: Tuple[str, ...] = ()
    config: Optional[str] = None
    description: Optional[str] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


def _parse_repository(index: int, item: Any) -> Repository:
    if not isinstance(item, dict):
        raise RecipeError(f"repositories[{index}] must be a mapping with name and server")
    name = item.get("name")
    server = item.get("server")
    if not isinstance(name, str) or not name:
        raise RecipeError(f"repositories[{index}].name must be a non-empty string")
    if not isinstance(server, str) or not server:
        raise RecipeError(f"repositories[{index}].server must be a non-empty string")
    return Repository(name=name, server=server)


def parse_action_config(raw: Dict[str, Any]) -> ActionConfig:
    if not isinstance(raw, dict):
        raise RecipeError(f"Action record must be a mapping, got {type(raw).__name__}")

    action = raw.get("action", ACTION_NAME)
    if action != ACTION_NAME:
        raise RecipeError(f"Expected a '{ACTION_NAME}' action, got {action!r}")

    repos_raw = raw.get("repositories")
    if repos_raw is None:
        repos_raw = []
    if not isinstance(repos_raw, list):
        raise RecipeError("repositories must be a list")
    repositories = tuple(_parse_repository(i, item) for i, item in enumerate(repos_raw))

    pkgs_raw = raw.get("packages") or []
    if not isinstance(pkgs_raw, list) or not all(isinstance(p, str) for p in pkgs_raw):
        raise RecipeError("packages must be a list of strings")

    config = raw.get("config")
    if config is not None and not isinstance(config, str):
        raise RecipeError("config must be a path string")

    description = raw.get("description")
    return ActionConfig(
        repositories=repositories,
        packages=tuple(pkgs_raw),
        config=config or None,
        description=str(description) if description else None,
        raw=raw,
    )


def _select_action(data: Dict[str, Any]) -> Dict[str, Any]:
    # A full recipe lists actions; a bare action record is also accepted.
    actions = data.get("actions")
    if actions is None:
        return data
    if not isinstance(actions, list):
        raise RecipeError("actions must be a list")
    for entry in actions:
        if isinstance(entry, dict) and entry.get("action") == ACTION_NAME:
            return entry
    raise RecipeError(f"No '{ACTION_NAME}' action found in recipe")


def load_action_config(path: str) -> ActionConfig:
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RecipeError(f"Couldn't read recipe {p}: {e}", cause=e) from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise RecipeError(f"Couldn't parse recipe {p}: {e}", cause=e) from e
    if not isinstance(data, dict):
        raise RecipeError(f"Recipe must contain a mapping/object: {p}")

    return parse_action_config(_select_action(data))
