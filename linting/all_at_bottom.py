#!/usr/bin/env python
"""Enforce that __all__ is defined once and appears at the bottom of a module.

Rules (top-level only):
- If __all__ exists, it must be exactly one `__all__ = [...]` statement
- No __all__ mutations (+=, .append/.extend calls, del)
- __all__ must be the last top-level statement in the file

Files without __all__ are skipped.
"""

from __future__ import annotations

import ast
import sys
import argparse
from pathlib import Path


def _is_name(node: ast.AST, name: str) -> bool:
    return isinstance(node, ast.Name) and node.id == name


def _is_canonical_all_stmt(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return len(node.targets) == 1 and _is_name(node.targets[0], "__all__")
    if isinstance(node, ast.AnnAssign):
        return _is_name(node.target, "__all__") and node.value is not None
    return False


def _mutates_all(node: ast.stmt) -> bool:
    if isinstance(node, ast.Assign):
        return any(_is_name(t, "__all__") for t in node.targets) and not _is_canonical_all_stmt(node)
    if isinstance(node, ast.AugAssign):
        return _is_name(node.target, "__all__")
    if isinstance(node, ast.Delete):
        return any(_is_name(t, "__all__") for t in node.targets)
    if isinstance(node, ast.Expr) and isinstance(node.value, ast.Call):
        func = node.value.func
        return isinstance(func, ast.Attribute) and _is_name(func.value, "__all__")
    return False


def _describe_node(node: ast.stmt) -> str:
    if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef, ast.ClassDef)):
        return f"`{node.name}`"
    if isinstance(node, (ast.Import, ast.ImportFrom)):
        return "import"
    if isinstance(node, ast.Assign):
        names = [t.id for t in node.targets if isinstance(t, ast.Name)]
        return f"assignment `{', '.join(names)}`" if names else "assignment"
    if isinstance(node, ast.If):
        return "if statement"
    return type(node).__name__


def collect_violations(filepath: Path, root: Path) -> list[str]:
    try:
        tree = ast.parse(filepath.read_text(encoding="utf-8"), filename=str(filepath))
    except (OSError, UnicodeDecodeError, SyntaxError):
        return []

    rel = filepath.relative_to(root)
    canonical = [(idx, node) for idx, node in enumerate(tree.body) if _is_canonical_all_stmt(node)]
    mutations = [node for node in tree.body if _mutates_all(node)]

    if not canonical and not mutations:
        return []

    violations = [
        f"  {rel}:{node.lineno} non-canonical `__all__` usage; use exactly one `__all__` assignment at file bottom"
        for node in mutations
    ]
    if len(canonical) != 1:
        if not canonical:
            violations.append(f"  {rel}: `__all__` must be set once via a single top-level assignment")
        for _, node in canonical:
            violations.append(f"  {rel}:{node.lineno} multiple `__all__` assignments")
        return violations

    all_idx, _ = canonical[0]
    for node in tree.body[all_idx + 1 :]:
        violations.append(f"  {rel}:{node.lineno} {_describe_node(node)} defined after `__all__`")
    return violations


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Enforce that __all__ is defined once and placed at module bottom.")
    parser.add_argument("--dirs", nargs="+", default=["relay"], help="Directories to scan (default: relay)")
    parser.add_argument("--root", default=".", help="Project root for relative path display (default: .)")
    args = parser.parse_args(argv)

    root = Path(args.root).resolve()
    violations: list[str] = []
    for d in args.dirs:
        scan_dir = (root / d).resolve()
        if not scan_dir.is_dir():
            continue
        for py_file in sorted(scan_dir.rglob("*.py")):
            if "__pycache__" not in py_file.parts:
                violations.extend(collect_violations(py_file, root))

    if violations:
        print("__all__ placement violations:", file=sys.stderr)
        for violation in violations:
            print(violation, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
