"""
Tests that enforce coding standards.

Source and test modules import whole modules under an alias:
'import X as _x' for external modules, 'import speckit.x as x' for
internal ones. Only __init__.py files re-export with 'from X import Y'.
"""

import ast as _ast
import pathlib as _pathlib

import pytest as _pytest

SRC_DIR = _pathlib.Path(__file__).parent.parent / "src" / "speckit"
TESTS_DIR = _pathlib.Path(__file__).parent


def _python_files(directory: _pathlib.Path) -> list[_pathlib.Path]:
    return sorted(p for p in directory.rglob("*.py") if p.name != "__init__.py")


def _is_type_checking_block(node: _ast.AST) -> bool:
    if not isinstance(node, _ast.If):
        return False
    test = node.test
    if isinstance(test, _ast.Attribute):
        return test.attr == "TYPE_CHECKING"
    return isinstance(test, _ast.Name) and test.id == "TYPE_CHECKING"


def _iter_imports(tree: _ast.AST) -> list[_ast.Import | _ast.ImportFrom]:
    """Collect import nodes, skipping TYPE_CHECKING blocks."""
    found: list[_ast.Import | _ast.ImportFrom] = []
    pending = [tree]
    while pending:
        node = pending.pop()
        if _is_type_checking_block(node):
            continue
        if isinstance(node, (_ast.Import, _ast.ImportFrom)):
            found.append(node)
        pending.extend(_ast.iter_child_nodes(node))
    return found


def find_violations(source: str, path: str = "<string>") -> list[str]:
    """
    Check one module's imports.

    Returns:
        Messages of the form 'path:line: problem'.
    """
    violations = []
    for node in _iter_imports(_ast.parse(source)):
        if isinstance(node, _ast.ImportFrom):
            if node.module != "__future__":
                violations.append(f"{path}:{node.lineno}: 'from {node.module} import ...'")
            continue
        for alias in node.names:
            internal = alias.name.split(".")[0] == "speckit"
            if internal or alias.asname is None:
                continue
            if not alias.asname.startswith("_"):
                violations.append(
                    f"{path}:{node.lineno}: external alias '{alias.asname}' should start with '_'"
                )
    return violations


@_pytest.mark.parametrize("directory", [SRC_DIR, TESTS_DIR], ids=["src", "tests"])
def test_import_style(directory: _pathlib.Path) -> None:
    violations: list[str] = []
    for path in _python_files(directory):
        violations.extend(find_violations(path.read_text(encoding="utf-8"), str(path)))

    if violations:
        _pytest.fail("Import style violations:\n" + "\n".join(f"  {v}" for v in violations))


class TestFindViolations:
    """Tests for the checker itself."""

    def test_detects_from_import(self) -> None:
        assert len(find_violations("from pathlib import Path")) == 1

    def test_allows_future_imports(self) -> None:
        assert find_violations("from __future__ import annotations") == []

    def test_external_alias_needs_underscore(self) -> None:
        assert len(find_violations("import yaml as yaml_lib")) == 1
        assert find_violations("import yaml as _yaml") == []

    def test_internal_alias_is_free(self) -> None:
        assert find_violations("import speckit.errors as errors") == []

    def test_ignores_type_checking_block(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from some_module import SomeType
"""
        assert find_violations(content) == []

    def test_detects_import_after_type_checking(self) -> None:
        content = """
import typing as _typing

if _typing.TYPE_CHECKING:
    from allowed import Type

from forbidden import Other
"""
        violations = find_violations(content)
        assert len(violations) == 1
        assert "forbidden" in violations[0]
