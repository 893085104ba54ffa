"""Base notifier implementing the Template Method pattern.

All chat providers share the same reminder algorithm:
    compose() → mention() + _render_line()   ← per provider
    build_payload()                          ← per provider
    send() → requests.post() → _check_response()

Subclasses implement:
  - _resolved_mention: how a mapped chat id is written in the message
  - _render_line: one reminder line for one ReviewRequest
  - build_payload: the provider's webhook JSON body
"""

from __future__ import annotations

import enum
import logging
import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import requests

if TYPE_CHECKING:
    from prremind_core.models import ReviewRequest

logger = logging.getLogger(__name__)

BOT_USERNAME = "Pull Request reviews reminder"
_TIMEOUT = 10


class Provider(str, enum.Enum):
    SLACK = "slack"
    ROCKET = "rocket"
    MSTEAMS = "msteams"

    def __str__(self) -> str:
        return self.value


class BaseNotifier(ABC):
    provider: Provider
    TIMEOUT: int = _TIMEOUT

    def __init__(self, rng: random.Random | None = None):
        self.rng = rng if rng is not None else random.Random()

    # ------------------------------------------------------------------ #
    # Public interface                                                     #
    # ------------------------------------------------------------------ #

    def compose(self, review_requests: list[ReviewRequest], identifier_map: dict[str, str]) -> str:
        """Render one newline-terminated reminder line per review request, in order."""
        message = ""
        for request in review_requests:
            message += self._render_line(request, self.mention(request.reviewer, identifier_map))
        return message

    def mention(self, login: str, identifier_map: dict[str, str]) -> str:
        """Return the provider mention for ``login``, or ``@login`` when it is not mapped."""
        chat_id = identifier_map.get(login)
        if chat_id:
            return self._resolved_mention(login, chat_id)
        return f"@{login}"

    def send(self, webhook_url: str, payload: dict) -> requests.Response:
        """POST ``payload`` as JSON to ``webhook_url``.

        Transport and HTTP status errors propagate as requests exceptions.
        """
        response = requests.post(webhook_url, json=payload, timeout=self.TIMEOUT)
        response.raise_for_status()
        self._check_response(response, payload)
        return response

    # ------------------------------------------------------------------ #
    # Abstract — implement in each provider                               #
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _resolved_mention(self, login: str, chat_id: str) -> str:
        """Mention syntax for a login found in the provider map."""

    @abstractmethod
    def _render_line(self, request: ReviewRequest, mention: str) -> str:
        """One reminder line, including its trailing newline."""

    @abstractmethod
    def build_payload(
        self,
        text: str,
        review_requests: list[ReviewRequest],
        identifier_map: dict[str, str],
        channel: str,
    ) -> dict:
        """Wrap the composed text into the provider's webhook body."""

    # ------------------------------------------------------------------ #
    # Hooks                                                                #
    # ------------------------------------------------------------------ #

    def _check_response(self, response: requests.Response, payload: dict) -> None:
        """Inspect a 2xx response. Providers that confirm delivery in the body override this."""
