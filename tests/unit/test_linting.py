from __future__ import annotations

import importlib.util
from types import ModuleType
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(f"linting_{name}", ROOT / "linting" / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize("name", ["no_runtime_singletons", "one_class_per_file"])
def test_relay_package_passes(name: str) -> None:
    assert _load(name).main() == 0


def test_all_at_bottom_passes() -> None:
    assert _load("all_at_bottom").main(["--dirs", "relay", "--root", str(ROOT)]) == 0


def test_module_level_client_is_flagged(tmp_path: Path) -> None:
    module = tmp_path / "bot.py"
    module.write_text("import discord\n\nclient = discord.Client(intents=discord.Intents.none())\n")

    violations = _load("no_runtime_singletons").collect_violations(module, tmp_path)

    assert len(violations) == 1
    assert "session owner `Client`" in violations[0]


def test_two_behaviour_classes_are_flagged() -> None:
    source = "from dataclasses import dataclass\n\nclass A: ...\n\nclass B: ...\n\n@dataclass\nclass C: ...\n"
    assert _load("one_class_per_file").collect_top_level_classes(source) == ["A", "B"]


def test_all_after_code_is_flagged(tmp_path: Path) -> None:
    module = tmp_path / "mod.py"
    module.write_text("__all__ = ['f']\n\n\ndef f():\n    return 1\n")

    violations = _load("all_at_bottom").collect_violations(module, tmp_path)

    assert violations == ["  mod.py:4 `f` defined after `__all__`"]
