"""Tests for the CLI entry point."""

import subprocess
from unittest.mock import MagicMock

import requests
from click.testing import CliRunner
from github import GithubException

from prremind_cli.cli import main
from prremind_core.errors import ConfigFormatError, DeliveryRejected
from prremind_core.models import PullRequest


def _make_config(**overrides):
    config = {
        "repo": "owner/repo",
        "provider": "slack",
        "channel": "#reviews",
        "webhook_url": "https://hooks.example.com/abc",
        "github_provider_map": "",
        "ignore_label": "",
        "github_token": None,
        "github_api_url": None,
    }
    config.update(overrides)
    return config


def _patch_common(mocker, config=None):
    """Patch load_config and connect_repo for most tests."""
    cfg = config or _make_config()
    mocker.patch("prremind_core.config.load_config", return_value=cfg)
    repo = MagicMock()
    mocker.patch("prremind_cli.auth.connect_repo", return_value=repo)
    return cfg, repo


class TestRemindValidation:
    def test_missing_github_token(self, mocker):
        mocker.patch("prremind_core.config.load_config", return_value=_make_config())
        mocker.patch("prremind_cli.auth.resolve_github_token", return_value=None)

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code != 0
        assert "GITHUB_TOKEN" in result.output

    def test_missing_repo(self, mocker):
        mocker.patch("prremind_core.config.load_config", return_value=_make_config(repo=None))
        mocker.patch("prremind_cli.auth.resolve_github_token", return_value="tok")

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code != 0
        assert "--repo" in result.output

    def test_missing_webhook_url(self, mocker):
        _patch_common(mocker, config=_make_config(webhook_url=None))

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code != 0
        assert "webhook" in result.output.lower()

    def test_missing_webhook_url_allowed_for_dry_run(self, mocker):
        _patch_common(mocker, config=_make_config(webhook_url=None))
        mock_run = mocker.patch("prremind_cli.commands.remind.run_reminder")

        result = CliRunner().invoke(main, ["remind", "--dry-run"])
        assert result.exit_code == 0
        assert mock_run.call_args.kwargs["dry_run"] is True

    def test_invalid_provider_choice(self, mocker):
        _patch_common(mocker)
        result = CliRunner().invoke(main, ["remind", "--provider", "discord"])
        assert result.exit_code != 0

    def test_invalid_provider_in_config_file(self, mocker):
        _patch_common(mocker, config=_make_config(provider="discord"))
        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code != 0
        assert "discord" in result.output


class TestRemindRun:
    def test_options_passed_as_overrides(self, mocker):
        load = mocker.patch("prremind_core.config.load_config", return_value=_make_config())
        mocker.patch("prremind_cli.auth.connect_repo", return_value=MagicMock())
        mocker.patch("prremind_cli.commands.remind.run_reminder")

        CliRunner().invoke(
            main,
            [
                "remind",
                "--repo",
                "o/r",
                "--provider",
                "msteams",
                "--channel",
                "#dev",
                "--webhook-url",
                "https://hook",
                "--provider-map",
                "alice:U1",
                "--ignore-label",
                "wip",
            ],
        )

        overrides = load.call_args.kwargs["cli_overrides"]
        assert overrides == {
            "repo": "o/r",
            "provider": "msteams",
            "channel": "#dev",
            "webhook_url": "https://hook",
            "github_provider_map": "alice:U1",
            "ignore_label": "wip",
        }

    def test_options_read_from_environment(self, mocker):
        load = mocker.patch("prremind_core.config.load_config", return_value=_make_config())
        mocker.patch("prremind_cli.auth.connect_repo", return_value=MagicMock())
        mocker.patch("prremind_cli.commands.remind.run_reminder")

        CliRunner().invoke(main, ["remind"], env={"PRREMIND_PROVIDER": "rocket", "PRREMIND_CHANNEL": "#env"})

        overrides = load.call_args.kwargs["cli_overrides"]
        assert overrides["provider"] == "rocket"
        assert overrides["channel"] == "#env"

    def test_config_path_passed_through(self, mocker):
        load = mocker.patch("prremind_core.config.load_config", return_value=_make_config())
        mocker.patch("prremind_cli.auth.connect_repo", return_value=MagicMock())
        mocker.patch("prremind_cli.commands.remind.run_reminder")

        CliRunner().invoke(main, ["--config", "custom.yml", "remind"])

        assert load.call_args.args[0] == "custom.yml"

    def test_calls_run_reminder_with_repo(self, mocker):
        cfg, repo = _patch_common(mocker)
        mock_run = mocker.patch("prremind_cli.commands.remind.run_reminder")

        result = CliRunner().invoke(main, ["remind"])

        assert result.exit_code == 0
        mock_run.assert_called_once_with(cfg, repo_obj=repo, dry_run=False)

    def test_config_format_error_fails(self, mocker):
        _patch_common(mocker)
        mocker.patch(
            "prremind_cli.commands.remind.run_reminder",
            side_effect=ConfigFormatError("The github-provider-map string is not in correct format"),
        )

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code == 1
        assert "github-provider-map" in result.output

    def test_delivery_rejected_fails(self, mocker):
        _patch_common(mocker)
        mocker.patch("prremind_cli.commands.remind.run_reminder", side_effect=DeliveryRejected("nope"))

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code == 1

    def test_transport_error_fails(self, mocker):
        _patch_common(mocker)
        mocker.patch(
            "prremind_cli.commands.remind.run_reminder",
            side_effect=requests.ConnectionError("connection refused"),
        )

        result = CliRunner().invoke(main, ["remind"])
        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_bad_config_value_fails_cleanly(self, tmp_path):
        cfg = tmp_path / "bad.yml"
        cfg.write_text("github_provider_map: 42\n")

        result = CliRunner().invoke(main, ["--config", str(cfg), "remind", "--dry-run"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "github_provider_map" in result.output

    def test_list_ignore_label_in_config_file(self, tmp_path, mocker):
        cfg = tmp_path / "remind.yml"
        cfg.write_text("provider: rocket\nrepo: o/r\nignore_label: [wip, blocked]\n")
        mocker.patch("prremind_cli.auth.connect_repo", return_value=MagicMock())
        mock_run = mocker.patch("prremind_cli.commands.remind.run_reminder")

        result = CliRunner().invoke(main, ["--config", str(cfg), "remind", "--dry-run"])

        assert result.exit_code == 0
        assert mock_run.call_args.args[0]["ignore_label"] == "wip,blocked"

    def test_end_to_end_dry_run_prints_payload(self, mocker):
        _, repo = _patch_common(mocker, config=_make_config(provider="rocket"))
        gh_pr = MagicMock(number=1, html_url="http://x/1", title="Fix bug")
        gh_pr.requested_reviewers = [MagicMock(login="alice")]
        gh_pr.requested_teams = []
        gh_pr.labels = []
        repo.get_pulls.return_value = [gh_pr]
        post = mocker.patch("prremind_core.providers.base.requests.post")

        result = CliRunner().invoke(main, ["remind", "--dry-run"])

        assert result.exit_code == 0
        assert "Dry run" in result.output
        post.assert_not_called()


class TestPending:
    def test_lists_waiting_pull_requests(self, mocker):
        _patch_common(mocker)
        mocker.patch(
            "prremind_cli.commands.pending.fetch_open_pull_requests",
            return_value=[
                PullRequest(url="http://x/7", title="Fix login bug", reviewers=("alice",), number=7),
                PullRequest(url="http://x/8", title="Idle change", number=8),
            ],
        )

        result = CliRunner().invoke(main, ["pending"])

        assert result.exit_code == 0
        assert "#7" in result.output
        assert "alice" in result.output
        assert "#8" not in result.output

    def test_no_pending_pull_requests(self, mocker):
        _patch_common(mocker)
        mocker.patch("prremind_cli.commands.pending.fetch_open_pull_requests", return_value=[])

        result = CliRunner().invoke(main, ["pending"])

        assert result.exit_code == 0
        assert "No pull requests" in result.output

    def test_ignore_label_applied(self, mocker):
        _patch_common(mocker, config=_make_config(ignore_label="wip"))
        mocker.patch(
            "prremind_cli.commands.pending.fetch_open_pull_requests",
            return_value=[PullRequest(url="http://x/7", title="Draft", reviewers=("a",), labels=("wip",), number=7)],
        )

        result = CliRunner().invoke(main, ["pending"])

        assert "No pull requests" in result.output

    def test_github_error_fails_cleanly(self, mocker):
        _patch_common(mocker)
        mocker.patch(
            "prremind_cli.commands.pending.fetch_open_pull_requests",
            side_effect=GithubException(404, {"message": "Not Found"}, None),
        )

        result = CliRunner().invoke(main, ["pending", "--repo", "o/r"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Not Found" in result.output

    def test_network_error_fails_cleanly(self, mocker):
        _patch_common(mocker)
        mocker.patch(
            "prremind_cli.commands.pending.fetch_open_pull_requests",
            side_effect=requests.ConnectionError("connection refused"),
        )

        result = CliRunner().invoke(main, ["pending"])

        assert result.exit_code == 1
        assert "connection refused" in result.output

    def test_bad_config_value_fails_cleanly(self, tmp_path):
        cfg = tmp_path / "bad.yml"
        cfg.write_text("ignore_label:\n  wip: true\n")

        result = CliRunner().invoke(main, ["--config", str(cfg), "pending"])

        assert result.exit_code == 1
        assert "ignore_label" in result.output


class TestResolveGithubToken:
    def test_env_var_takes_precedence(self, monkeypatch):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.setenv("GITHUB_TOKEN", "env-token")
        monkeypatch.setenv("GH_TOKEN", "gh-env-token")
        assert resolve_github_token() == "env-token"

    def test_gh_token_env_used_second(self, monkeypatch):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.setenv("GH_TOKEN", "gh-env-token")
        assert resolve_github_token() == "gh-env-token"

    def test_falls_back_to_gh_cli(self, monkeypatch, mocker):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GH_TOKEN", raising=False)
        mocker.patch(
            "prremind_cli.auth.subprocess.run",
            return_value=MagicMock(returncode=0, stdout="gh-cli-token\n"),
        )
        assert resolve_github_token() == "gh-cli-token"

    def test_returns_none_when_gh_not_installed(self, monkeypatch, mocker):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GH_TOKEN", raising=False)
        mocker.patch("prremind_cli.auth.subprocess.run", side_effect=FileNotFoundError)
        assert resolve_github_token() is None

    def test_returns_none_when_gh_times_out(self, monkeypatch, mocker):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GH_TOKEN", raising=False)
        mocker.patch(
            "prremind_cli.auth.subprocess.run",
            side_effect=subprocess.TimeoutExpired(cmd="gh", timeout=5),
        )
        assert resolve_github_token() is None

    def test_returns_none_when_gh_not_logged_in(self, monkeypatch, mocker):
        from prremind_cli.auth import resolve_github_token

        monkeypatch.delenv("GITHUB_TOKEN", raising=False)
        monkeypatch.delenv("GH_TOKEN", raising=False)
        mocker.patch("prremind_cli.auth.subprocess.run", return_value=MagicMock(returncode=1, stdout=""))
        assert resolve_github_token() is None
