# tests/test_project_constraints.py
"""
Project constraint tests for bug classes that break the Streamlit deployment.

- Module shadowing (a src/ module hiding a stdlib or third-party package)
- Dependency drift (a third-party import missing from pyproject.toml)
- Unsafe asyncio.run() calls (crash inside Streamlit's running event loop)
"""

from __future__ import annotations

import ast
import re
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
PYPROJECT = PROJECT_ROOT / "pyproject.toml"

# Import name -> distribution name where they differ
DISTRIBUTION_NAMES: dict[str, str] = {}


def _local_top_level_names() -> set[str]:
    names = {p.name for p in SRC_DIR.iterdir() if p.is_dir() and (p / "__init__.py").exists()}
    names |= {p.stem for p in SRC_DIR.glob("*.py")}
    # ui/ is a plain directory on sys.path, its subpackages are imported as ui.*
    names |= {p.name for p in SRC_DIR.iterdir() if p.is_dir()}
    return names


def _imported_top_level_names() -> dict[str, set[str]]:
    """Top-level absolute imports per source file."""
    imports: dict[str, set[str]] = {}
    for py_file in SRC_DIR.rglob("*.py"):
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
        for node in ast.walk(tree):
            if isinstance(node, ast.Import):
                names = {alias.name.split(".")[0] for alias in node.names}
            elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                names = {node.module.split(".")[0]}
            else:
                continue
            for name in names:
                imports.setdefault(name, set()).add(str(py_file.relative_to(PROJECT_ROOT)))
    return imports


def _parse_pyproject_deps() -> set[str]:
    """Normalised package names from pyproject.toml [project].dependencies."""
    text = PYPROJECT.read_text()
    match = re.search(r'^\s*dependencies\s*=\s*\[(.*?)\]', text, re.MULTILINE | re.DOTALL)
    names: set[str] = set()
    if not match:
        return names
    for line in match.group(1).splitlines():
        line = line.strip().strip(",").strip('"').strip("'")
        pkg_match = re.match(r"^([A-Za-z0-9_.-]+)", line)
        if pkg_match:
            names.add(pkg_match.group(1).lower().replace("_", "-"))
    return names


class TestModuleShadowing:
    """No module at the src/ root may share a name with a package we import."""

    PROTECTED_NAMES = {"aiohttp", "backoff", "pandas", "streamlit", "typer", "logging", "json", "asyncio", "typing"}

    def test_no_shadowed_modules_in_src(self) -> None:
        shadows = sorted(_local_top_level_names() & self.PROTECTED_NAMES)
        assert not shadows, f"src/ shadows: {shadows}"


class TestDependencyCompleteness:
    """Every third-party import must be declared in pyproject.toml."""

    def test_pyproject_declares_imports(self) -> None:
        declared = _parse_pyproject_deps()
        local = _local_top_level_names()
        missing: list[str] = []
        for name, files in sorted(_imported_top_level_names().items()):
            if name in sys.stdlib_module_names or name in local or name == "__future__":
                continue
            dist = DISTRIBUTION_NAMES.get(name, name).lower().replace("_", "-")
            if dist not in declared:
                missing.append(f"{name} (imported by {', '.join(sorted(files))})")
        assert not missing, "Undeclared dependencies:\n" + "\n".join(missing)

    def test_test_extra_declared(self) -> None:
        text = PYPROJECT.read_text()
        assert re.search(r'^test\s*=\s*\[', text, re.MULTILINE)
        assert "pytest-asyncio" in text


class TestAsyncioPatterns:
    """Controllers are driven only through the guarded run_async helper."""

    def test_no_asyncio_run_in_renderers(self) -> None:
        renderer_dirs = [SRC_DIR / "ui" / "renderers", SRC_DIR / "ui" / "pages"]
        violations = [
            str(py_file.relative_to(PROJECT_ROOT))
            for directory in renderer_dirs
            for py_file in directory.rglob("*.py")
            if "asyncio.run(" in py_file.read_text(encoding="utf-8")
        ]
        assert not violations, f"asyncio.run() called directly in: {violations}"

    def test_no_bare_asyncio_run_in_src(self) -> None:
        """asyncio.run() must sit behind a get_running_loop() check."""
        violations: list[str] = []
        for py_file in SRC_DIR.rglob("*.py"):
            source = py_file.read_text(encoding="utf-8")
            if "asyncio.run(" in source and "get_running_loop" not in source:
                violations.append(str(py_file.relative_to(PROJECT_ROOT)))
        assert not violations, f"Unguarded asyncio.run() in: {violations}"
