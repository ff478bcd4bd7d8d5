from pathlib import Path

from pacstrap_action.main import main


def _write_recipe(recipedir: Path, extra: str = "") -> Path:
    recipe = recipedir / "action.yaml"
    recipe.write_text(
        "action: pacstrap\n"
        "repositories:\n"
        "  - name: core\n"
        "    server: http://mirror.example/core\n"
        "packages: [base]\n" + extra,
        encoding="utf-8",
    )
    return recipe


def _argv(context, recipe: Path, tmp_path: Path) -> list:
    return [
        "--recipe",
        str(recipe),
        "--rootdir",
        context.rootdir,
        "--scratchdir",
        context.scratchdir,
        "--log",
        str(tmp_path / "logs" / "action.log"),
    ]


def test_main_success(recorder, context, tmp_path: Path) -> None:
    recipe = _write_recipe(Path(context.recipedir))

    assert main(_argv(context, recipe, tmp_path)) == 0
    assert recorder.programs() == ["pacman-key", "pacman-key", "pacstrap"]


def test_main_override_defaults_to_recipe_directory(recorder, context, tmp_path: Path) -> None:
    recipedir = Path(context.recipedir)
    (recipedir / "custom.conf").write_text("[options]\n", encoding="utf-8")
    recipe = _write_recipe(recipedir, "config: custom.conf\n")
    seen = []
    recorder.hooks["pacstrap"] = lambda argv: seen.append(Path(argv[3]).read_text(encoding="utf-8"))

    assert main(_argv(context, recipe, tmp_path)) == 0
    assert seen == ["[options]\n"]


def test_main_failure_exit_code(recorder, context, tmp_path: Path) -> None:
    recorder.fail("pacstrap")
    recipe = _write_recipe(Path(context.recipedir))

    assert main(_argv(context, recipe, tmp_path)) == 1


def test_main_missing_recipe(recorder, context, tmp_path: Path) -> None:
    assert main(_argv(context, tmp_path / "absent.yaml", tmp_path)) == 1
    assert recorder.calls == []


def test_main_recipe_is_a_directory(recorder, context, tmp_path: Path) -> None:
    assert main(_argv(context, Path(context.recipedir), tmp_path)) == 1
    assert recorder.calls == []


def test_main_log_file_keeps_debug_transcript(recorder, context, tmp_path: Path) -> None:
    recipe = _write_recipe(Path(context.recipedir))

    assert main(_argv(context, recipe, tmp_path)) == 0

    transcript = (tmp_path / "logs" / "action.log").read_text(encoding="utf-8")
    assert "CMD pacstrap -GM -C" in transcript
    assert "Pacstrap | pacstrap: ok" in transcript
