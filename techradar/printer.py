from typing import Dict

from .ast import Program, Stmt


def _quote(text: str) -> str:
    escaped = text.replace('\\', '\\\\').replace('"', '\\"')
    return f'"{escaped}"'


def _format_opts(opts: Dict[str, object]) -> str:
    if not opts:
        return ""
    parts = []
    for key in sorted(opts.keys()):
        value = opts[key]
        if isinstance(value, bool):
            rendered = "true" if value else "false"
        elif isinstance(value, (int, float)):
            rendered = str(value)
        else:
            rendered = value if (isinstance(value, str) and value.isidentifier()) else _quote(str(value))
        parts.append(f"{key}={rendered}")
    return " [" + " ".join(parts) + "]"


def format_stmt(stmt: Stmt) -> str:
    kind = stmt.kind
    if kind == 'radar':
        return f"radar {_quote(stmt.data['title'])}{_format_opts(stmt.opts)}"
    if kind == 'quadrant':
        return f"quadrant {stmt.data['quadrant']} {_quote(stmt.data['title'])}"
    if kind == 'color':
        return f"color {stmt.data['target']} {_quote(stmt.data['value'])}"
    if kind == 'item':
        return f"item {_quote(stmt.data['name'])}{_format_opts(stmt.opts)}"
    raise ValueError(f"cannot print statement kind {kind!r}")


def print_program(prog: Program) -> str:
    return "".join(format_stmt(stmt) + "\n" for stmt in prog.stmts)
