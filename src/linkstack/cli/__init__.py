"""
linkstack.cli — CLI entry point.

Commands:
  linkstack run -f script.yaml   — Replay an op script, print the transcript
"""

import click

from linkstack.cli.run_cmd import run_cmd


@click.group()
@click.version_option(package_name="linkstack")
def main():
    """linkstack — singly-linked stack playground."""
    pass


main.add_command(run_cmd, "run")
