"""Errors raised by the reminder pipeline.

Transport failures are not wrapped: ``requests.RequestException`` and
``github.GithubException`` propagate unchanged so the CLI reports the
original cause.
"""

from __future__ import annotations


class ReminderError(Exception):
    """Base class for reminder failures that are not transport errors."""


class ConfigFormatError(ReminderError):
    """The github-provider-map string does not match ``name1:id1,name2:id2``."""


class DeliveryRejected(ReminderError):
    """The chat provider accepted the request but did not confirm delivery."""

    def __init__(self, body, message: str | None = None):
        self.body = body
        super().__init__(message or f"Notification rejected by provider: {body!r}")
