"""Pull request data passed through the reminder pipeline.

Decoupled from PyGithub so filters and message composition can be exercised
with plain values; gh.pull_request converts API objects into these records.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PullRequest:
    """An open pull request and the reviews requested on it."""

    url: str
    title: str
    reviewers: tuple[str, ...] = ()  # requested user logins
    teams: tuple[str, ...] = ()  # requested team slugs
    labels: tuple[str, ...] = ()
    number: int = 0

    @classmethod
    def from_github(cls, pr) -> PullRequest:
        """Build a record from a PyGithub ``PullRequest``."""
        return cls(
            url=pr.html_url,
            title=pr.title or "",
            reviewers=tuple(user.login for user in pr.requested_reviewers or []),
            teams=tuple(team.slug for team in pr.requested_teams or []),
            labels=tuple(label.name for label in pr.labels or []),
            number=pr.number or 0,
        )


@dataclass(frozen=True)
class ReviewRequest:
    """One reviewer (user login or team slug) asked to review one pull request."""

    url: str
    title: str
    reviewer: str
