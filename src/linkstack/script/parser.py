"""
linkstack.script.parser — Op script YAML parser.

script.yaml format:

    apiVersion: linkstack.io/v1
    kind: Script
    metadata:
      name: demo
    ops:
      - push: 1
      - push: 2
      - pop
      - peek
      - peek_mut: 42
      - iter
      - drain

Bare strings are ops without an argument, single-key
mappings are ops that take one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

API_VERSION = "linkstack.io/v1"

# op name → takes an argument
OPS: dict[str, bool] = {
    "push": True,
    "pop": False,
    "peek": False,
    "peek_mut": True,
    "iter": False,
    "drain": False,
}


@dataclass
class OpSpec:
    """A single script step."""
    op: str
    arg: Any = None
    has_arg: bool = False


@dataclass
class ScriptSpec:
    """Parsed op script."""
    name: str = "script"
    ops: list[OpSpec] = field(default_factory=list)


class ScriptParseError(Exception):
    """Script parse error."""
    pass


def parse_script_file(path: str | Path) -> ScriptSpec:
    """Parse a script YAML file.

    Args:
        path: Path to the script

    Returns:
        ScriptSpec object

    Raises:
        ScriptParseError: Format error
        FileNotFoundError: File not found
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Script file not found: {p}")

    with open(p) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ScriptParseError(f"Script file must be a YAML mapping, got {type(data).__name__}")

    return parse_script_dict(data)


def parse_script_dict(data: dict[str, Any]) -> ScriptSpec:
    """Create a ScriptSpec from a dict."""
    api_version = data.get("apiVersion", "")
    if api_version and api_version != API_VERSION:
        raise ScriptParseError(
            f"Unsupported apiVersion: '{api_version}'. Expected '{API_VERSION}'"
        )

    kind = data.get("kind", "")
    if kind and kind != "Script":
        raise ScriptParseError(
            f"Unsupported kind: '{kind}'. Expected 'Script'"
        )

    metadata = data.get("metadata", {}) or {}
    if not isinstance(metadata, dict):
        raise ScriptParseError("metadata must be a mapping")
    name = metadata.get("name", "script")

    ops_raw = data.get("ops", [])
    if not isinstance(ops_raw, list):
        raise ScriptParseError("ops must be a list")

    ops = [_parse_op(i, entry) for i, entry in enumerate(ops_raw)]

    return ScriptSpec(name=name, ops=ops)


def _parse_op(index: int, entry: Any) -> OpSpec:
    if isinstance(entry, str):
        op, arg, has_arg = entry, None, False
    elif isinstance(entry, dict):
        if len(entry) != 1:
            raise ScriptParseError(
                f"ops[{index}] must have exactly one key, got {len(entry)}"
            )
        (op, arg), = entry.items()
        has_arg = True
    else:
        raise ScriptParseError(f"ops[{index}] must be a string or a mapping")

    if op not in OPS:
        raise ScriptParseError(
            f"ops[{index}]: unknown op '{op}'. "
            f"Expected one of: {', '.join(OPS)}"
        )
    if OPS[op] != has_arg:
        need = "requires an argument" if OPS[op] else "takes no argument"
        raise ScriptParseError(f"ops[{index}]: '{op}' {need}")

    return OpSpec(op=op, arg=arg, has_arg=has_arg)
