from __future__ import annotations

import ast
from pathlib import Path

_PACKAGE = Path(__file__).resolve().parents[1] / "src" / "project_migrator"


def _collect_python_files(directory: Path) -> list[Path]:
    return sorted(path for path in directory.rglob("*.py") if path.is_file())


def _find_forbidden_imports(files: list[Path], forbidden_prefixes: tuple[str, ...]) -> list[str]:
    violations: list[str] = []
    for path in files:
        module = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(module):
            if isinstance(node, ast.Import):
                for alias in node.names:
                    if alias.name.startswith(forbidden_prefixes):
                        violations.append(f"{path}: import {alias.name}")
            elif isinstance(node, ast.ImportFrom):
                if node.module is None:
                    continue
                if node.module.startswith(forbidden_prefixes):
                    violations.append(f"{path}: from {node.module} import ...")
    return violations


def test_engine_only_talks_to_the_provider_contract() -> None:
    files = _collect_python_files(_PACKAGE / "engine")
    violations = _find_forbidden_imports(files, ("project_migrator.providers", "project_migrator.cli", "httpx"))
    assert not violations, f"engine imports forbidden modules: {violations}"


def test_contracts_do_not_import_other_layers() -> None:
    files = _collect_python_files(_PACKAGE / "contracts")
    forbidden = tuple(
        f"project_migrator.{layer}"
        for layer in ("engine", "providers", "cli", "auth", "snapshot", "mappings", "sdk")
    )
    violations = _find_forbidden_imports(files, forbidden)
    assert not violations, f"contracts import higher layers: {violations}"


def test_sdk_does_not_import_github_provider_internals() -> None:
    violations = _find_forbidden_imports([_PACKAGE / "sdk.py"], ("project_migrator.providers.github",))
    assert not violations, f"sdk imports forbidden github provider internals: {violations}"


def test_sdk_does_not_import_cli_layer() -> None:
    violations = _find_forbidden_imports([_PACKAGE / "sdk.py"], ("project_migrator.cli",))
    assert not violations, f"sdk imports forbidden cli layer modules: {violations}"
