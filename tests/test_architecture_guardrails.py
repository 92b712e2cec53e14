from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        if "dist" in path.parts:
            continue
        yield path


def _imports(path: Path) -> list[str]:
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    names: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            names.append(node.module or "")
    return names


def _violations(root: Path, forbidden: tuple[str, ...]) -> list[tuple[str, str]]:
    found = []
    for path in _python_files(root):
        for name in _imports(path):
            if any(name == f or name.startswith(f + ".") for f in forbidden):
                found.append((str(path.relative_to(ROOT)), name))
    return found


def test_core_layer_does_not_import_ui_or_infra():
    violations = _violations(ROOT / "core", ("ui", "infra"))
    assert not violations, f"Core layer imports outer layers: {violations}"


def test_infra_layer_does_not_import_ui():
    violations = _violations(ROOT / "infra", ("ui",))
    assert not violations, f"Infra layer imports UI layer: {violations}"


def test_scheduling_engine_is_free_of_persistence_and_qt():
    violations = _violations(ROOT / "core" / "services" / "scheduling", ("sqlalchemy", "PySide6"))
    assert not violations, f"Scheduling engine depends on frameworks: {violations}"
