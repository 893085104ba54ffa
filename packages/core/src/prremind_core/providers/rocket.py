from __future__ import annotations

from typing import TYPE_CHECKING

from prremind_core.providers.base import BOT_USERNAME, BaseNotifier, Provider

if TYPE_CHECKING:
    from prremind_core.models import ReviewRequest


def format_rocket_message(channel: str, text: str) -> dict:
    """Rocket.Chat incoming webhooks accept the same body as Slack's."""
    return {
        "channel": channel,
        "username": BOT_USERNAME,
        "text": text,
    }


class RocketNotifier(BaseNotifier):
    provider = Provider.ROCKET

    def _resolved_mention(self, login: str, chat_id: str) -> str:
        return f"<@{chat_id}>"

    def _render_line(self, request: ReviewRequest, mention: str) -> str:
        return f'Hey {mention}, the PR "{request.title}" is waiting for your review: {request.url}\n'

    def build_payload(self, text, review_requests, identifier_map, channel) -> dict:
        return format_rocket_message(channel, text)
