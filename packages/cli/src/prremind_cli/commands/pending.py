"""pending command — list pull requests waiting for a review."""

from __future__ import annotations

import click
import requests
from github import GithubException
from rich.console import Console
from rich.table import Table

from prremind_core.errors import ReminderError
from prremind_core.gh.pull_request import fetch_open_pull_requests
from prremind_core.reminder import pending_pull_requests

console = Console()


@click.command("pending")
@click.option("--repo", default=None, envvar="PRREMIND_REPO", help="GitHub repository (owner/name).")
@click.option(
    "--ignore-label",
    default=None,
    envvar="PRREMIND_IGNORE_LABEL",
    help="Comma-separated labels to leave out.",
)
@click.pass_context
def pending_cmd(ctx, repo: str | None, ignore_label: str | None):
    """Show open pull requests that are waiting for a review.

    Applies the same filters as `prremind remind` but sends nothing — useful
    for checking ignore-label settings before wiring up a webhook.
    """
    from prremind_core.config import load_config
    from prremind_cli.auth import connect_repo

    config_path = ctx.obj.get("config_path", ".prremind.yml") if ctx.obj else ".prremind.yml"
    try:
        config = load_config(config_path, cli_overrides={"repo": repo, "ignore_label": ignore_label})
        this_repo = connect_repo(config)
        open_pull_requests = fetch_open_pull_requests(this_repo)
    except (ReminderError, GithubException, requests.RequestException) as e:
        raise click.ClickException(str(e))

    pull_requests = pending_pull_requests(open_pull_requests, config.get("ignore_label"))
    if not pull_requests:
        console.print("[yellow]No pull requests waiting for reviews.[/yellow]")
        return

    table = Table(title=f"Waiting for review — {config['repo']}", show_header=True, header_style="bold cyan")
    table.add_column("PR", style="bold", width=6)
    table.add_column("Title", max_width=50)
    table.add_column("Reviewers")
    table.add_column("Teams")

    for pr in pull_requests:
        table.add_row(
            f"#{pr.number}",
            pr.title[:50],
            ", ".join(pr.reviewers),
            ", ".join(pr.teams),
        )

    console.print(table)
