"""
linkstack.script.engine — Script replay.

Seeds a Stack, runs each op in order and records
what it returned:

    push      → nothing
    pop       → popped element (null when empty)
    peek      → top element (null when empty)
    peek_mut  → element that was overwritten (null when empty)
    iter      → elements top to bottom
    drain     → elements consumed by into_iter
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

import yaml

from linkstack.core.stack import Stack
from linkstack.script.parser import OpSpec, ScriptSpec, ScriptParseError, parse_script_file


class ScriptError(Exception):
    """Script execution error."""
    pass


@dataclass
class ScriptResult:
    """Transcript of one script run."""
    name: str
    steps: list[dict[str, Any]] = field(default_factory=list)
    remaining: list[Any] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "steps": list(self.steps),
            "remaining": list(self.remaining),
        }

    def to_yaml(self) -> str:
        return yaml.dump(
            self.to_dict(),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


def run_script(spec: ScriptSpec, seed: Iterable[Any] | None = None) -> ScriptResult:
    """Replay a parsed script.

    Args:
        spec: Parsed script
        seed: Elements pushed, in order, before the first op

    Returns:
        ScriptResult with one step per op and the leftover elements
    """
    stack: Stack[Any] = Stack()
    for elem in seed or ():
        stack.push(elem)

    result = ScriptResult(name=spec.name)
    for op in spec.ops:
        result.steps.append(_apply(stack, op))

    result.remaining = list(stack)
    return result


def run_script_file(
    path: str | Path,
    seed: Iterable[Any] | None = None,
) -> ScriptResult:
    """Parse and replay a script file."""
    try:
        spec = parse_script_file(path)
    except ScriptParseError as e:
        raise ScriptError(f"Script parse error: {e}") from e
    except yaml.YAMLError as e:
        raise ScriptError(f"Invalid YAML in {path}: {e}") from e

    return run_script(spec, seed)


def _apply(stack: Stack[Any], op: OpSpec) -> dict[str, Any]:
    step: dict[str, Any] = {"op": op.op}
    if op.has_arg:
        step["arg"] = op.arg

    if op.op == "push":
        stack.push(op.arg)
    elif op.op == "pop":
        step["result"] = stack.pop()
    elif op.op == "peek":
        step["result"] = stack.peek()
    elif op.op == "peek_mut":
        ref = stack.peek_mut()
        if ref is None:
            step["result"] = None
        else:
            step["result"] = ref.value
            ref.value = op.arg
    elif op.op == "iter":
        step["result"] = list(stack.iter())
    elif op.op == "drain":
        step["result"] = list(stack.into_iter())
    else:
        raise ScriptError(f"Unsupported op: '{op.op}'")

    return step
