"""Selection of pull requests that are waiting for a review."""

from __future__ import annotations

import re
from typing import Iterable

from prremind_core.models import PullRequest, ReviewRequest


def select_review_candidates(pull_requests: Iterable[PullRequest]) -> list[PullRequest]:
    """Keep pull requests with at least one requested reviewer or team."""
    return [pr for pr in pull_requests if pr.reviewers or pr.teams]


def _parse_labels(labels_csv: str | None) -> set[str]:
    # "wip , do not merge" -> {"wip", "do not merge"}
    if not labels_csv:
        return set()
    return set(re.sub(r"\s*,\s*", ",", labels_csv.strip()).split(","))


def exclude_by_label(pull_requests: Iterable[PullRequest], labels_csv: str | None) -> list[PullRequest]:
    """Drop pull requests carrying any of the comma-separated ``labels_csv`` labels."""
    ignored = _parse_labels(labels_csv)
    return [pr for pr in pull_requests if not ignored.intersection(pr.labels)]


def count_reviewers(pull_requests: Iterable[PullRequest]) -> int:
    """Total requested user reviewers; team requests are not counted."""
    return sum(len(pr.reviewers) for pr in pull_requests)


def expand_reviewers(pull_requests: Iterable[PullRequest]) -> list[ReviewRequest]:
    """Flatten pull requests into one ReviewRequest per requested user, then per team."""
    requests: list[ReviewRequest] = []
    for pr in pull_requests:
        for login in pr.reviewers:
            requests.append(ReviewRequest(url=pr.url, title=pr.title, reviewer=login))
        for slug in pr.teams:
            requests.append(ReviewRequest(url=pr.url, title=pr.title, reviewer=slug))
    return requests
