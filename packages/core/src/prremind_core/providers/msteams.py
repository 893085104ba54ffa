"""Microsoft Teams notifier.

Teams incoming webhooks take an Adaptive Card; people are only notified when
the card carries a matching ``mention`` entity for each ``<at>name</at>`` in
the text. Card reference:
https://learn.microsoft.com/microsoftteams/platform/task-modules-and-cards/cards/cards-format
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from prremind_core.errors import DeliveryRejected
from prremind_core.providers.base import BaseNotifier, Provider

if TYPE_CHECKING:
    import requests

    from prremind_core.models import ReviewRequest

logger = logging.getLogger(__name__)

ADAPTIVE_CARD_CONTENT_TYPE = "application/vnd.microsoft.card.adaptive"
ADAPTIVE_CARD_SCHEMA = "http://adaptivecards.io/schemas/adaptive-card.json"


def build_teams_mentions(identifier_map: dict[str, str], review_requests: list[ReviewRequest]) -> list[dict]:
    """Return one mention entity per review request whose reviewer is in the map.

    Unmapped reviewers get no entity; their line keeps the plain ``@login``.
    """
    mentions: list[dict] = []
    if not identifier_map:
        return mentions
    for request in review_requests:
        chat_id = identifier_map.get(request.reviewer)
        # Teams drops the whole mention unless both id and name are present.
        if chat_id:
            mentions.append(
                {
                    "type": "mention",
                    "text": f"<at>{request.reviewer}</at>",
                    "mentioned": {
                        "id": chat_id,
                        "name": request.reviewer,
                    },
                }
            )
    return mentions


def format_teams_message(text: str, mentions: list[dict] | None = None) -> dict:
    return {
        "type": "message",
        "attachments": [
            {
                "contentType": ADAPTIVE_CARD_CONTENT_TYPE,
                "content": {
                    "type": "AdaptiveCard",
                    "body": [
                        {
                            "type": "TextBlock",
                            "text": text,
                            "wrap": True,
                        }
                    ],
                    "$schema": ADAPTIVE_CARD_SCHEMA,
                    "version": "1.0",
                    "msteams": {
                        "width": "Full",
                        "entities": list(mentions or []),
                    },
                },
            }
        ],
    }


class TeamsNotifier(BaseNotifier):
    provider = Provider.MSTEAMS

    def _resolved_mention(self, login: str, chat_id: str) -> str:
        return f"<at>{login}</at>"

    def _render_line(self, request: ReviewRequest, mention: str) -> str:
        # Two trailing spaces force a line break in the Teams markdown renderer.
        link = f"[{request.url}]({request.url})"
        return f'Hey {mention}, the PR "{request.title}" is waiting for your review: {link}  \n'

    def build_payload(self, text, review_requests, identifier_map, channel) -> dict:
        return format_teams_message(text, build_teams_mentions(identifier_map, review_requests))

    def _check_response(self, response: requests.Response, payload: dict) -> None:
        """Teams answers 200 even on failure; only a body of ``1`` means the card was posted.

        See https://github.com/MicrosoftDocs/msteams-docs/issues/402
        """
        try:
            body = response.json()
        except ValueError:
            body = response.text
        if body == 1 and not isinstance(body, bool):
            return
        logger.error("MS Teams notification failed. Request body sent:\n%s", json.dumps(payload, indent=2))
        raise DeliveryRejected(body)
