"""linkstack.script — YAML op scripts replayed against a Stack."""

from linkstack.script.parser import parse_script_file, parse_script_dict, ScriptSpec, OpSpec, ScriptParseError
from linkstack.script.engine import run_script, run_script_file, ScriptResult, ScriptError

__all__ = [
    "parse_script_file",
    "parse_script_dict",
    "ScriptSpec",
    "OpSpec",
    "ScriptParseError",
    "run_script",
    "run_script_file",
    "ScriptResult",
    "ScriptError",
]
