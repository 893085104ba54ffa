from __future__ import annotations

from typing import TYPE_CHECKING

from prremind_core.phrases import pick_phrase, render_phrase
from prremind_core.providers.base import BOT_USERNAME, BaseNotifier, Provider

if TYPE_CHECKING:
    from prremind_core.models import ReviewRequest


def format_slack_message(channel: str, text: str) -> dict:
    return {
        "channel": channel,
        "username": BOT_USERNAME,
        "text": text,
    }


class SlackNotifier(BaseNotifier):
    provider = Provider.SLACK

    def _resolved_mention(self, login: str, chat_id: str) -> str:
        return f"<@{chat_id}>"

    def _render_line(self, request: ReviewRequest, mention: str) -> str:
        # A fresh draw per line: the same phrase may come up twice in one message.
        phrase = pick_phrase(self.rng)
        return render_phrase(phrase, mention=mention, url=request.url) + "\n"

    def build_payload(self, text, review_requests, identifier_map, channel) -> dict:
        return format_slack_message(channel, text)
