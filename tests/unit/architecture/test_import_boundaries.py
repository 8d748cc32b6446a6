"""Tests for architecture import boundaries.

These tests ensure that the layering is maintained:
- The domain layer imports neither application, infrastructure nor CLI
- The application layer imports neither infrastructure nor CLI
"""

from __future__ import annotations

import ast
from pathlib import Path
import re

import pytest

# Root of the atom_feed package
PACKAGE_ROOT = Path(__file__).parent.parent.parent.parent / "atom_feed"


def extract_imports_from_file(file_path: Path) -> list[str]:
    """Extract all imported module names from a Python file.

    Relative imports are resolved against the file's package so that
    ``from ...infrastructure import x`` is reported as
    ``atom_feed.infrastructure``.
    """
    tree = ast.parse(file_path.read_text(encoding="utf-8"))
    package = list(file_path.relative_to(PACKAGE_ROOT.parent).parent.parts)
    imports: list[str] = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            imports.extend(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level:
                base = package[: len(package) - node.level + 1]
                module = ".".join([*base, node.module] if node.module else base)
            else:
                module = node.module or ""
            imports.append(module)
    return imports


def find_violations(layer: str, forbidden_pattern: str) -> list[str]:
    pattern = re.compile(forbidden_pattern)
    violations = []
    for file_path in sorted((PACKAGE_ROOT / layer).rglob("*.py")):
        for imported in extract_imports_from_file(file_path):
            if pattern.search(imported):
                violations.append(f"{file_path.relative_to(PACKAGE_ROOT)}: {imported}")
    return violations


@pytest.mark.parametrize(
    ("layer", "forbidden"),
    [
        ("domain", r"^atom_feed\.(application|infrastructure|cli)\b"),
        ("application", r"^atom_feed\.(infrastructure|cli)\b"),
        ("infrastructure", r"^atom_feed\.cli\b"),
    ],
)
def test_layer_boundaries(layer, forbidden):
    violations = find_violations(layer, forbidden)

    assert not violations, "Forbidden imports:\n" + "\n".join(violations)


def test_domain_has_no_xml_dependency():
    assert not find_violations("domain", r"^xml\b")
