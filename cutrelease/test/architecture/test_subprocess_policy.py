from __future__ import annotations

import ast

from ._gate import require_arch_checks_enabled
from ._utils import iter_source_files, parse_imports, read_tree


def _direct_subprocess_calls(tree: ast.AST) -> list[int]:
    lines: list[int] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call):
            continue
        func = node.func
        if not isinstance(func, ast.Attribute):
            continue
        if func.attr not in {"run", "check_output", "check_call", "call", "Popen"}:
            continue
        if isinstance(func.value, ast.Name) and func.value.id == "subprocess":
            lines.append(node.lineno)
    return lines


def test_subprocess_is_only_used_by_the_process_wrapper() -> None:
    require_arch_checks_enabled()

    allowlist = {"platform/process.py"}
    offenders: list[str] = []
    for rel, path in iter_source_files():
        if rel in allowlist:
            continue
        for line in _direct_subprocess_calls(read_tree(path)):
            offenders.append(f"{rel}:{line}: direct subprocess call outside allowlist")
        for item in parse_imports(path):
            if item.module in {"os.system", "pty"}:
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)
