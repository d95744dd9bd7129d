#!/usr/bin/env python
"""Enforce one top-level non-dataclass class per runtime Python file.

Dataclasses (settings, request values, error types) may share a module;
behavioural classes such as the coordinator or the dispatch gate may not.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "relay"


def _is_dataclass_decorator(decorator: ast.expr) -> bool:
    target: ast.expr = decorator.func if isinstance(decorator, ast.Call) else decorator
    if isinstance(target, ast.Name):
        return target.id == "dataclass"
    if isinstance(target, ast.Attribute):
        return target.attr == "dataclass"
    return False


def collect_top_level_classes(source: str) -> list[str]:
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return []

    return [
        node.name
        for node in tree.body
        if isinstance(node, ast.ClassDef)
        and not any(_is_dataclass_decorator(decorator) for decorator in node.decorator_list)
    ]


def main(src_dir: Path = SRC_DIR, root: Path = ROOT) -> int:
    violations: list[str] = []

    for py_file in sorted(src_dir.rglob("*.py")) if src_dir.is_dir() else []:
        try:
            classes = collect_top_level_classes(py_file.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError):
            continue
        if len(classes) > 1:
            violations.append(f"  {py_file.relative_to(root)}: {len(classes)} classes ({', '.join(classes)})")

    if violations:
        print("One non-dataclass-class-per-file violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
