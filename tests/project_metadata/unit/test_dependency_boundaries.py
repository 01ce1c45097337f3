"""Parsing layers stay free of CLI, configuration and serialization imports."""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

FORBIDDEN_PREFIXES = (
    "click",
    "yaml",
    "json_schema_catalog.cli",
    "json_schema_catalog.configuration",
    "json_schema_catalog.results_writing",
    "json_schema_catalog.catalog_building",
    "json_schema_catalog.schema_loading",
)


def _package_root() -> Path:
    return Path(__file__).resolve().parents[3] / "src" / "json_schema_catalog"


def _imported_modules(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    modules: set[str] = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.module and node.level == 0:
            modules.add(node.module)
    return modules


@pytest.mark.parametrize(
    "package",
    ["diagnostics", "type_catalog", "construct_parsing", "schema_parsing"],
)
def test_parsing_packages_do_not_depend_on_outer_layers(package: str) -> None:
    for source in sorted((_package_root() / package).glob("*.py")):
        for module in _imported_modules(source):
            assert not module.startswith(FORBIDDEN_PREFIXES), f"{source.name} imports {module}"
