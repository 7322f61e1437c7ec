"""
linkstack.cli.run_cmd — linkstack run command.

  linkstack run -f script.yaml
  linkstack run -f script.yaml --push 1 --push 2 -o out.yaml
"""

import sys
import click

from linkstack.script.engine import run_script_file, ScriptError
from linkstack.utils import coerce_value


@click.command("run")
@click.option("-f", "--file", "script_file", required=True,
              help="Op script (YAML)")
@click.option("--push", "push_args", multiple=True,
              help="Element pushed before the script runs (multiple allowed)")
@click.option("-o", "--output", default=None,
              help="Output file (default: stdout)")
def run_cmd(script_file, push_args, output):
    """Replay an op script against a fresh stack."""
    seed = [coerce_value(v) for v in push_args]

    try:
        result = run_script_file(script_file, seed=seed)
    except (FileNotFoundError, ScriptError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    _output_yaml(result.to_yaml(), output)


def _output_yaml(yaml_str, output):
    if output:
        with open(output, "w") as f:
            f.write(yaml_str)
        click.echo(f"Written to {output}", err=True)
    else:
        click.echo(yaml_str)
