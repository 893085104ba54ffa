from __future__ import annotations

from github import Auth, Github

from prremind_core.models import PullRequest

_DEFAULT_BASE_URL = "https://api.github.com"


def get_repo(repo_name: str, token: str, base_url: str | None = None):
    # base_url points at GitHub Enterprise when GITHUB_API_URL is set.
    return Github(auth=Auth.Token(token), base_url=base_url or _DEFAULT_BASE_URL).get_repo(repo_name)


def get_pull_requests(repo, state: str = "open"):
    return repo.get_pulls(state=state)


def fetch_open_pull_requests(repo) -> list[PullRequest]:
    """Return the repository's open pull requests as immutable records."""
    return [PullRequest.from_github(pr) for pr in get_pull_requests(repo)]
