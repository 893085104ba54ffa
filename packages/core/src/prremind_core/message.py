"""Provider dispatch and reminder message composition."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from prremind_core.providers.base import BaseNotifier, Provider
from prremind_core.providers.msteams import TeamsNotifier
from prremind_core.providers.rocket import RocketNotifier
from prremind_core.providers.slack import SlackNotifier

if TYPE_CHECKING:
    from prremind_core.models import ReviewRequest


def get_notifier(provider: Provider | str, rng: random.Random | None = None) -> BaseNotifier:
    """Return the notifier for ``provider``.

    Strings are coerced through Provider, so an unsupported name raises
    ValueError here instead of producing an empty payload later.
    """
    match Provider(provider):
        case Provider.SLACK:
            return SlackNotifier(rng=rng)
        case Provider.ROCKET:
            return RocketNotifier(rng=rng)
        case Provider.MSTEAMS:
            return TeamsNotifier(rng=rng)
        case unhandled:
            # Reached only if a Provider member is added without an arm here.
            raise ValueError(f"No notifier for provider {unhandled!r}.")


def compose_message(
    review_requests: list[ReviewRequest],
    identifier_map: dict[str, str],
    provider: Provider | str,
    rng: random.Random | None = None,
) -> str:
    """Build the reminder text for ``provider``, one line per review request.

    ``rng`` only affects Slack, which picks a random phrase for every line.
    """
    return get_notifier(provider, rng=rng).compose(review_requests, identifier_map)
