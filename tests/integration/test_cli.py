import json
from pathlib import Path

import pytest
from PIL import Image

from dungen.cli import build_parser, configuration_from_args, main
from dungen.config import DEFAULT_CONFIGURATION


def test_prints_ascii_maze(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--width", "6", "--height", "4", "--seed", "3"]) == 0
    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 9
    assert all(len(line) == 13 for line in lines)
    assert lines[0] == "#" * 13
    assert lines[-1] == "#" * 13


def test_same_seed_same_output(capsys: pytest.CaptureFixture[str]) -> None:
    args = ["--width", "10", "--height", "7", "--seed", "12"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_writes_png(tmp_path: Path) -> None:
    output = tmp_path / "dungeon.png"
    code = main(
        ["--width", "5", "--height", "3", "--seed", "1", "--output", str(output), "--cell-size", "4"]
    )
    assert code == 0
    with Image.open(output) as image:
        assert image.size == (11 * 4, 7 * 4)


def test_invalid_value_exits_with_error(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--width", "5", "--height", "5", "--randomness", "1.5"]) == 2
    assert "randomness" in capsys.readouterr().err


def test_missing_config_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--config", str(tmp_path / "missing.json")]) == 2
    assert "invalid configuration" in capsys.readouterr().err


def test_defaults_without_flags() -> None:
    configuration = configuration_from_args(build_parser().parse_args([]))
    assert configuration == DEFAULT_CONFIGURATION


def test_flags_override_config_file(tmp_path: Path) -> None:
    path = tmp_path / "dungeon.json"
    path.write_text(
        json.dumps({"width": 12, "height": 9, "chanceToRemoveDeadends": 0.5, "seed": 4})
    )
    args = build_parser().parse_args(["--config", str(path), "--height", "3", "--deadends", "0"])
    configuration = configuration_from_args(args)
    assert configuration.width == 12
    assert configuration.height == 3
    assert configuration.chance_to_remove_deadends == 0.0
    assert configuration.seed == 4
    assert configuration.randomness == DEFAULT_CONFIGURATION.randomness
