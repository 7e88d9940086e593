from __future__ import annotations

import ast

from ._utils import imported_modules, iter_python_files, package_root, read_tree


def _non_test_files() -> list[tuple[str, ast.AST]]:
    root = package_root()
    out: list[tuple[str, ast.AST]] = []
    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.parts and rel.parts[0] == "test":
            continue
        out.append((rel.as_posix(), read_tree(file_path)))
    return out


def test_subprocess_is_only_imported_by_process_module() -> None:
    offenders: list[str] = []
    for rel, tree in _non_test_files():
        if rel == "platform/process.py":
            continue
        for module, line in imported_modules(tree):
            if module == "subprocess":
                offenders.append(f"{rel}:{line}: imports subprocess")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)


def test_library_layers_do_not_import_cli() -> None:
    offenders: list[str] = []
    for rel, tree in _non_test_files():
        if rel.startswith("cli/") or rel == "__main__.py":
            continue
        for module, line in imported_modules(tree):
            if module == "typer" or module.startswith("pkgdelta.cli"):
                offenders.append(f"{rel}:{line}: imports {module}")

    assert not offenders, "Layering violations:\n" + "\n".join(offenders)
