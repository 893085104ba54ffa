"""CLI entry point for prremind.

Commands:
  remind   — send a review reminder for open pull requests to a chat channel
  pending  — list pull requests waiting for a review, without notifying anyone
"""

from __future__ import annotations

import importlib.metadata
import logging

import click

from prremind_cli.commands.pending import pending_cmd
from prremind_cli.commands.remind import remind_cmd


@click.group()
@click.version_option(
    version=importlib.metadata.version("prremind"),
    prog_name="prremind",
)
@click.option(
    "--config",
    "config_path",
    default=".prremind.yml",
    show_default=True,
    help="Path to the configuration file.",
    envvar="PRREMIND_CONFIG",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config_path: str, verbose: bool):
    """Remind reviewers about open GitHub pull requests on Slack, Rocket.Chat or MS Teams."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


main.add_command(remind_cmd)
main.add_command(pending_cmd)
