"""Core reminder orchestration."""

from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field

from rich.console import Console

from prremind_core.errors import ConfigFormatError
from prremind_core.filters import count_reviewers, exclude_by_label, expand_reviewers, select_review_candidates
from prremind_core.gh.pull_request import fetch_open_pull_requests, get_repo
from prremind_core.message import get_notifier
from prremind_core.models import PullRequest, ReviewRequest
from prremind_core.provider_map import parse_provider_map, validate_provider_map

console = Console()
logger = logging.getLogger(__name__)


@dataclass
class ReminderSummary:
    """Result returned by run_reminder.

    ``payload`` is None when no pull request was waiting for a review, in
    which case nothing was sent.
    """

    repo: str
    provider: str
    total_pull_requests: int = 0
    total_reviewers: int = 0
    pull_requests: list[PullRequest] = field(default_factory=list)
    review_requests: list[ReviewRequest] = field(default_factory=list)
    text: str = ""
    payload: dict | None = None
    sent: bool = False


def pending_pull_requests(pull_requests: list[PullRequest], ignore_label: str | None) -> list[PullRequest]:
    """Pull requests with a requested reviewer and none of the ignored labels."""
    return exclude_by_label(select_review_candidates(pull_requests), ignore_label)


def print_payload(payload: dict) -> None:
    """Print the webhook body to the terminal without sending it."""
    console.print("\n[bold]Dry run — notification not sent. Payload:[/bold]\n")
    console.print_json(json.dumps(payload))


def run_reminder(
    config: dict,
    repo_obj=None,
    pull_requests: list[PullRequest] | None = None,
    dry_run: bool = False,
    rng: random.Random | None = None,
) -> ReminderSummary:
    """Run the reminder pipeline once and return a ReminderSummary.

    Pull requests come from ``pull_requests`` when given, else from
    ``repo_obj``, else from the GitHub repository named in ``config``.
    ConfigFormatError is raised before anything is sent when the provider
    map is malformed. Network errors from GitHub or the webhook propagate.
    """
    repo = config.get("repo") or ""
    notifier = get_notifier(config["provider"], rng=rng)
    summary = ReminderSummary(repo=repo, provider=notifier.provider.value)

    if pull_requests is None:
        console.print("Getting open pull requests...")
        if repo_obj is None:
            repo_obj = get_repo(repo, token=config["github_token"], base_url=config.get("github_api_url"))
        pull_requests = fetch_open_pull_requests(repo_obj)

    summary.total_pull_requests = len(pull_requests)
    summary.total_reviewers = count_reviewers(pull_requests)
    console.print(
        f"There are {summary.total_pull_requests} open pull requests and {summary.total_reviewers} reviewers"
    )

    summary.pull_requests = pending_pull_requests(pull_requests, config.get("ignore_label"))
    console.print(f"There are {len(summary.pull_requests)} pull requests waiting for reviews")
    if not summary.pull_requests:
        return summary

    map_string = config.get("github_provider_map") or ""
    if map_string and not validate_provider_map(map_string):
        raise ConfigFormatError(
            'The github-provider-map string is not in correct format: "name1:id1,name2:id2,..."'
        )
    identifier_map = parse_provider_map(map_string)

    summary.review_requests = expand_reviewers(summary.pull_requests)
    summary.text = notifier.compose(summary.review_requests, identifier_map)
    summary.payload = notifier.build_payload(
        summary.text, summary.review_requests, identifier_map, config.get("channel") or ""
    )

    if dry_run:
        print_payload(summary.payload)
        return summary

    webhook_url = config.get("webhook_url")
    if not webhook_url:
        raise ValueError("No webhook URL configured.")

    notifier.send(webhook_url, summary.payload)
    summary.sent = True
    console.print("[green]Notification sent successfully![/green]")
    logger.debug("Request body sent:\n%s", json.dumps(summary.payload, indent=2))
    return summary
