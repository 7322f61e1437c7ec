"""
tests/test_script.py — Op script tests.

Parser validation and engine replay.
"""

import os
import sys
import yaml
import pytest
import tempfile
from dataclasses import fields

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from linkstack.script.parser import parse_script_file, parse_script_dict, ScriptParseError
from linkstack.script.engine import run_script, run_script_file, ScriptError


def _write_yaml(data, suffix=".yaml"):
    f = tempfile.NamedTemporaryFile(mode="w", suffix=suffix, delete=False)
    yaml.dump(data, f)
    f.flush()
    f.close()
    return f.name


BASIC_SCRIPT = {
    "apiVersion": "linkstack.io/v1",
    "kind": "Script",
    "metadata": {"name": "basics"},
    "ops": [
        {"push": 1},
        {"push": 2},
        {"push": 3},
        "pop",
        "pop",
        {"push": 4},
        {"push": 5},
        "pop",
        "pop",
        "pop",
        "pop",
    ],
}


# ─────────────────────────────────────────────
# PARSER
# ─────────────────────────────────────────────
class TestParser:
    def test_parse_basic(self):
        spec = parse_script_dict(BASIC_SCRIPT)
        assert spec.name == "basics"
        assert len(spec.ops) == 11
        assert spec.ops[0].op == "push"
        assert spec.ops[0].arg == 1
        assert spec.ops[0].has_arg
        assert spec.ops[3].op == "pop"
        assert not spec.ops[3].has_arg
        assert [f.name for f in fields(spec)] == ["name", "ops"]

    def test_parse_file(self):
        path = _write_yaml(BASIC_SCRIPT)
        spec = parse_script_file(path)
        os.unlink(path)
        assert spec.name == "basics"

    def test_defaults(self):
        spec = parse_script_dict({"ops": ["pop"]})
        assert spec.name == "script"
        assert [o.op for o in spec.ops] == ["pop"]

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_script_file("/nonexistent/script.yaml")

    def test_not_a_mapping(self):
        path = _write_yaml(["pop"])
        with pytest.raises(ScriptParseError, match="YAML mapping"):
            parse_script_file(path)
        os.unlink(path)

    def test_wrong_api_version(self):
        with pytest.raises(ScriptParseError, match="apiVersion"):
            parse_script_dict({"apiVersion": "linkstack.io/v2", "ops": []})

    def test_wrong_kind(self):
        with pytest.raises(ScriptParseError, match="kind"):
            parse_script_dict({"kind": "Queue", "ops": []})

    def test_ops_not_list(self):
        with pytest.raises(ScriptParseError, match="ops must be a list"):
            parse_script_dict({"ops": {"push": 1}})

    def test_unknown_op(self):
        with pytest.raises(ScriptParseError, match="unknown op 'shift'"):
            parse_script_dict({"ops": ["shift"]})

    def test_missing_argument(self):
        with pytest.raises(ScriptParseError, match="requires an argument"):
            parse_script_dict({"ops": ["push"]})

    def test_unexpected_argument(self):
        with pytest.raises(ScriptParseError, match="takes no argument"):
            parse_script_dict({"ops": [{"pop": 1}]})

    def test_multi_key_entry(self):
        with pytest.raises(ScriptParseError, match="exactly one key"):
            parse_script_dict({"ops": [{"push": 1, "pop": None}]})

    def test_bad_entry_type(self):
        with pytest.raises(ScriptParseError, match=r"ops\[0\]"):
            parse_script_dict({"ops": [42]})


# ─────────────────────────────────────────────
# ENGINE
# ─────────────────────────────────────────────
class TestEngine:
    def test_basic_replay(self):
        result = run_script(parse_script_dict(BASIC_SCRIPT))
        pops = [s["result"] for s in result.steps if s["op"] == "pop"]
        assert pops == [3, 2, 5, 4, 1, None]
        assert result.remaining == []

    def test_push_has_no_result(self):
        result = run_script(parse_script_dict({"ops": [{"push": "a"}]}))
        assert result.steps == [{"op": "push", "arg": "a"}]
        assert result.remaining == ["a"]

    def test_peek_and_peek_mut(self):
        spec = parse_script_dict({"ops": [
            "peek",
            {"peek_mut": 0},
            {"push": 1}, {"push": 2}, {"push": 3},
            "peek",
            {"peek_mut": 42},
            "peek",
            "pop",
        ]})
        steps = run_script(spec).steps
        assert steps[0]["result"] is None
        assert steps[1]["result"] is None
        assert steps[5]["result"] == 3
        assert steps[6] == {"op": "peek_mut", "arg": 42, "result": 3}
        assert steps[7]["result"] == 42
        assert steps[8]["result"] == 42

    def test_iter_and_drain(self):
        spec = parse_script_dict({"ops": ["iter", "drain", "iter", "pop"]})
        result = run_script(spec, seed=[1, 2, 3])
        assert [s["result"] for s in result.steps] == [[3, 2, 1], [3, 2, 1], [], None]
        assert result.remaining == []

    def test_seed_order(self):
        result = run_script(parse_script_dict({"ops": []}), seed=["x", "y"])
        assert result.remaining == ["y", "x"]

    def test_to_yaml(self):
        result = run_script(parse_script_dict(BASIC_SCRIPT))
        doc = yaml.safe_load(result.to_yaml())
        assert doc["name"] == "basics"
        assert len(doc["steps"]) == 11
        assert doc["remaining"] == []
        assert list(doc.keys()) == ["name", "steps", "remaining"]

    def test_run_file(self):
        path = _write_yaml(BASIC_SCRIPT)
        result = run_script_file(path, seed=[0])
        os.unlink(path)
        # five pushes, six pops: the last pop takes the seed
        assert result.steps[-1] == {"op": "pop", "result": 0}
        assert result.remaining == []

    def test_run_file_keeps_leftovers(self):
        path = _write_yaml({"ops": [{"push": 1}, {"push": 2}, "pop"]})
        result = run_script_file(path, seed=[0])
        os.unlink(path)
        assert result.steps[-1]["result"] == 2
        assert result.remaining == [1, 0]

    def test_run_file_parse_error(self):
        path = _write_yaml({"ops": ["shift"]})
        with pytest.raises(ScriptError, match="Script parse error"):
            run_script_file(path)
        os.unlink(path)

    def test_run_file_invalid_yaml(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
            f.write("ops: [pop\n")
        with pytest.raises(ScriptError, match="Invalid YAML"):
            run_script_file(f.name)
        os.unlink(f.name)
