#!/usr/bin/env python
"""Reject module-level session singletons in runtime Python modules.

The gateway session must be created inside the application lifespan and
passed around through `RuntimeDeps`. This check flags:
- lazy singleton helpers (`get_instance`, `*_instance = None`, `*Singleton`)
- module-level construction of session owners (`discord.Client(...)`,
  `ConnectionCoordinator(...)`, `GatewayConnector(...)`, `DispatchGate(...)`)
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "relay"

SINGLETON_CLASS_SUFFIX = "Singleton"
SINGLETON_FN_NAMES = {"get_instance", "reset_instance", "get_client", "get_coordinator"}
SESSION_OWNER_CALLS = {"Client", "ConnectionCoordinator", "GatewayConnector", "DispatchGate"}


def _top_level_targets(node: ast.Assign | ast.AnnAssign) -> list[str]:
    if isinstance(node, ast.AnnAssign):
        return [node.target.id] if isinstance(node.target, ast.Name) else []
    return [target.id for target in node.targets if isinstance(target, ast.Name)]


def _called_name(value: ast.expr | None) -> str | None:
    if not isinstance(value, ast.Call):
        return None
    func = value.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        return func.attr
    return None


def _is_lazy_singleton_state(node: ast.Assign | ast.AnnAssign) -> bool:
    names = _top_level_targets(node)
    if not names:
        return False
    value = node.value
    if isinstance(value, ast.Constant) and value.value is None:
        return any(name.lower().endswith(("_instance", "_client", "_session")) for name in names)
    return False


def collect_violations(filepath: Path, root: Path = ROOT) -> list[str]:
    try:
        source = filepath.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return []

    try:
        tree = ast.parse(source, filename=str(filepath))
    except SyntaxError:
        return []

    violations: list[str] = []
    rel = filepath.relative_to(root)

    for node in tree.body:
        if isinstance(node, ast.ClassDef) and node.name.endswith(SINGLETON_CLASS_SUFFIX):
            violations.append(f"  {rel}:{node.lineno} class `{node.name}` uses singleton naming")
        elif isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)) and node.name in SINGLETON_FN_NAMES:
            violations.append(f"  {rel}:{node.lineno} function `{node.name}` suggests singleton lifecycle")
        elif isinstance(node, (ast.Assign, ast.AnnAssign)):
            names = ", ".join(_top_level_targets(node))
            if _is_lazy_singleton_state(node):
                violations.append(f"  {rel}:{node.lineno} lazy singleton module state assignment: {names}")
            elif _called_name(node.value) in SESSION_OWNER_CALLS:
                violations.append(
                    f"  {rel}:{node.lineno} session owner `{_called_name(node.value)}` built at import: {names}"
                )

    return violations


def main(src_dir: Path = SRC_DIR, root: Path = ROOT) -> int:
    if not src_dir.is_dir():
        print(f"[no-runtime-singletons] Missing source directory: {src_dir}", file=sys.stderr)
        return 1

    violations: list[str] = []
    for py_file in sorted(src_dir.rglob("*.py")):
        if "__pycache__" in py_file.parts:
            continue
        violations.extend(collect_violations(py_file, root))

    if not violations:
        return 0

    print("Runtime singleton pattern violations:", file=sys.stderr)
    for violation in violations:
        print(violation, file=sys.stderr)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
