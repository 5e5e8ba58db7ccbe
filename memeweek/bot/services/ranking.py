"""Top-k ranking of messages by qualifying reactions."""

from __future__ import annotations

import logging
from typing import Iterable, List

from memeweek.bot.services.models import (
    ContestMessage,
    ReactionIdentifierSet,
    ScoredMessage,
)

logger = logging.getLogger(__name__)

DEFAULT_WINNER_COUNT = 3


def count_qualifying_reactions(message: ContestMessage, reactions: ReactionIdentifierSet) -> int:
    """Sum the counts of the message's reactions that are in ``reactions``.

    Each reaction is visited once, so a reaction matching by both name
    and id still contributes its count a single time.
    """
    return sum(reaction.count for reaction in message.reactions if reactions.matches(reaction))


def rank_messages(
    messages: Iterable[ContestMessage],
    reactions: ReactionIdentifierSet,
    limit: int = DEFAULT_WINNER_COUNT,
) -> List[ScoredMessage]:
    """Return the ``limit`` messages with the most qualifying reactions.

    Messages without any qualifying reaction are dropped. Ties on count
    go to the earlier message; messages posted at the same instant keep
    their input order.

    Args:
        messages: Candidate messages
        reactions: Identifiers that count for this contest
        limit: Maximum number of results

    Returns:
        Scored messages, highest count first; empty if nothing qualifies
    """
    if limit <= 0 or not len(reactions):
        return []

    scored = [
        ScoredMessage(message=message, count=count_qualifying_reactions(message, reactions))
        for message in messages
    ]
    qualifying = [item for item in scored if item.count > 0]
    qualifying.sort(key=lambda item: (-item.count, item.message.created_at))

    logger.debug(f"{len(qualifying)} of {len(scored)} messages have qualifying reactions")
    return qualifying[:limit]
