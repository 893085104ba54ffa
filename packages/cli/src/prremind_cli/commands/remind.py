"""remind command — send a review reminder to a chat channel."""

from __future__ import annotations

import click
import requests
from github import GithubException

from prremind_core.errors import ReminderError
from prremind_core.providers.base import Provider
from prremind_core.reminder import run_reminder


@click.command("remind")
@click.option("--repo", default=None, envvar="PRREMIND_REPO", help="GitHub repository in owner/name format.")
@click.option(
    "--provider",
    type=click.Choice([p.value for p in Provider]),
    default=None,
    envvar="PRREMIND_PROVIDER",
    help="Chat provider to notify. Overrides config file.",
)
@click.option("--channel", default=None, envvar="PRREMIND_CHANNEL", help="Channel to post the reminder in.")
@click.option("--webhook-url", default=None, envvar="PRREMIND_WEBHOOK_URL", help="Incoming webhook URL.")
@click.option(
    "--provider-map",
    "github_provider_map",
    default=None,
    envvar="PRREMIND_PROVIDER_MAP",
    help='GitHub login to chat id map: "login1:id1,login2:id2".',
)
@click.option(
    "--ignore-label",
    default=None,
    envvar="PRREMIND_IGNORE_LABEL",
    help="Comma-separated labels; pull requests carrying any of them are skipped.",
)
@click.option("--dry-run", is_flag=True, help="Print the webhook payload instead of sending it.")
@click.pass_context
def remind_cmd(
    ctx,
    repo: str | None,
    provider: str | None,
    channel: str | None,
    webhook_url: str | None,
    github_provider_map: str | None,
    ignore_label: str | None,
    dry_run: bool,
):
    """Remind requested reviewers about open pull requests.

    Collects every open pull request with a pending review request, drops
    those carrying an ignored label, and posts one message mentioning each
    requested reviewer.

    \b
    Required environment variables:
      GITHUB_TOKEN         GitHub token (or use gh CLI)
    """
    from prremind_core.config import load_config
    from prremind_cli.auth import connect_repo

    config_path = ctx.obj.get("config_path", ".prremind.yml") if ctx.obj else ".prremind.yml"
    overrides = {
        "repo": repo,
        "provider": provider,
        "channel": channel,
        "webhook_url": webhook_url,
        "github_provider_map": github_provider_map,
        "ignore_label": ignore_label,
    }
    try:
        config = load_config(config_path, cli_overrides=overrides)
    except ReminderError as e:
        raise click.ClickException(str(e))

    if config["provider"] not in {p.value for p in Provider}:
        raise click.UsageError(f"Unsupported provider {config['provider']!r} in {config_path}.")
    if not dry_run and not config.get("webhook_url"):
        raise click.UsageError("No webhook URL configured. Pass --webhook-url or set webhook_url in the config file.")

    try:
        this_repo = connect_repo(config)
        run_reminder(config, repo_obj=this_repo, dry_run=dry_run)
    except (ReminderError, GithubException, requests.RequestException) as e:
        raise click.ClickException(str(e))
