"""Contest service tying window, collection and ranking together."""

from __future__ import annotations

import logging
from datetime import time
from typing import List, Optional, Sequence

from memeweek.bot.services.contest_window import resolve_contest_window
from memeweek.bot.services.exceptions import ConfigurationError
from memeweek.bot.services.message_collector import MessageSource, collect_messages_in_window
from memeweek.bot.services.models import (
    ContestCategory,
    ContestMessage,
    ReactionIdentifierSet,
    ScoredMessage,
    TimeWindow,
)
from memeweek.bot.services.ranking import rank_messages
from memeweek.shared.config import Settings
from memeweek.shared.date_provider import DateProvider, get_date_provider

logger = logging.getLogger(__name__)


def parse_channel_id(raw: Optional[str]) -> int:
    """Validate the configured contest channel id.

    Raises:
        ConfigurationError: If the id is missing or isn't a snowflake
    """
    value = (raw or "").strip()
    if not value:
        raise ConfigurationError("meme_channel_id")
    if not value.isdigit() or int(value) <= 0:
        raise ConfigurationError(
            "meme_channel_id",
            user_message="El ID del canal configurado no es válido.",
            context={"value": value},
        )
    return int(value)


def build_categories(settings: Settings) -> List[ContestCategory]:
    """Build the meme and bone categories from settings, in announcement order."""
    funny = ReactionIdentifierSet.of(settings.funny_reactions)
    bones = ReactionIdentifierSet.of(settings.bone_reactions)
    if not funny.isdisjoint(bones):
        logger.warning("Funny and bone reaction sets overlap; shared reactions count for both")

    return [
        ContestCategory(key="meme", title="Meme de la semana", emoji="🎉", reactions=funny),
        ContestCategory(key="bone", title="Hueso de la semana", emoji="🦴", reactions=bones),
    ]


class ContestService:
    """Runs the weekly contest computation for one channel.

    A new instance is built per command invocation; nothing is kept
    between runs.
    """

    def __init__(
        self,
        source: MessageSource,
        settings: Settings,
        date_provider: Optional[DateProvider] = None,
    ):
        self._source = source
        self._settings = settings
        self._date_provider = date_provider or get_date_provider()

    @property
    def categories(self) -> List[ContestCategory]:
        return build_categories(self._settings)

    def current_window(self) -> TimeWindow:
        """Resolve the contest window as of the provider's current time."""
        return resolve_contest_window(
            self._date_provider.utcnow(),
            tz=self._settings.tzinfo,
            anchor_weekday=self._settings.contest_anchor_weekday,
            anchor_time=time(self._settings.contest_anchor_hour),
        )

    async def collect(self, channel_id: int, window: TimeWindow) -> List[ContestMessage]:
        logger.info(f"Fetching messages from {window.start.isoformat()} to {window.end.isoformat()}")
        return await collect_messages_in_window(
            self._source,
            channel_id,
            window,
            page_size=self._settings.message_page_size,
        )

    def rank(self, messages: Sequence[ContestMessage], category: ContestCategory) -> List[ScoredMessage]:
        winners = rank_messages(messages, category.reactions, limit=self._settings.contest_max_winners)
        logger.info(f"Category {category.key}: {len(winners)} winner(s)")
        return winners
