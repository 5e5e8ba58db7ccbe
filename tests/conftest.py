"""Test configuration and fixtures for the contest bot."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence

import pytest
import pytz

from memeweek.bot.services.models import (
    ContestMessage,
    MessageAttachment,
    ReactionCount,
    TimeWindow,
)
from memeweek.shared.config import Settings
from memeweek.shared.config import override_settings
from memeweek.shared.date_provider import reset_date_provider


BOGOTA = pytz.timezone("America/Bogota")
TEST_CHANNEL_ID = "555000111222333444"
TEST_GUILD_ID = 111222333444555666


def bogota(year: int, month: int, day: int, hour: int = 0, minute: int = 0,
           second: int = 0, microsecond: int = 0) -> datetime:
    """Build an aware datetime in the contest timezone."""
    return BOGOTA.localize(datetime(year, month, day, hour, minute, second, microsecond))


class FakeMessageSource:
    """In-memory channel history paged the way Discord pages it.

    ``messages`` must be ordered newest first. Every call is recorded as
    a ``(limit, before)`` tuple.
    """

    def __init__(self, messages: Sequence[ContestMessage]):
        self.messages = list(messages)
        self.calls: List[tuple] = []

    async def fetch_page(self, channel_id, *, limit=100, before=None):
        self.calls.append((limit, before))
        start = 0
        if before is not None:
            ids = [message.id for message in self.messages]
            start = ids.index(before) + 1
        return self.messages[start:start + limit]


@pytest.fixture(autouse=True)
def _reset_date_provider():
    yield
    reset_date_provider()


@pytest.fixture
def bogota_time():
    """Factory for aware datetimes in America/Bogota."""
    return bogota


@pytest.fixture
def fake_source():
    """Factory for in-memory message sources."""
    return FakeMessageSource


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings."""
    return override_settings(
        discord_bot_token="test_token",
        meme_channel_id=TEST_CHANNEL_ID,
        log_level="DEBUG",
    )


@pytest.fixture
def contest_week() -> TimeWindow:
    """The full contest week starting Friday 2024-01-05 at noon."""
    return TimeWindow(start=bogota(2024, 1, 5, 12), end=bogota(2024, 1, 12, 12))


@pytest.fixture
def make_message():
    """Factory for contest messages.

    Reactions are given as ``{name: count}`` for unicode emoji, or as
    ReactionCount objects for custom ones.
    """
    def _make(
        message_id: str,
        created_at: datetime,
        reactions: Optional[Dict[str, int] | Sequence[ReactionCount]] = None,
        attachments: Sequence[str] = (),
        author_id: Optional[str] = None,
    ) -> ContestMessage:
        if isinstance(reactions, dict):
            reaction_counts = tuple(
                ReactionCount(name=name, emoji_id=None, count=count)
                for name, count in reactions.items()
            )
        else:
            reaction_counts = tuple(reactions or ())
        author = author_id or f"9{message_id}"
        return ContestMessage(
            id=message_id,
            created_at=created_at,
            author_id=author,
            author_mention=f"<@{author}>",
            author_name=f"user{author}",
            url=f"https://discord.com/channels/{TEST_GUILD_ID}/{TEST_CHANNEL_ID}/{message_id}",
            attachments=tuple(
                MessageAttachment(url=url, filename=url.rsplit("/", 1)[-1])
                for url in attachments
            ),
            reactions=reaction_counts,
        )

    return _make


@pytest.fixture
def hourly_feed(make_message):
    """Factory for a newest-first feed of one message per hour."""
    def _feed(newest: datetime, count: int) -> List[ContestMessage]:
        return [
            make_message(str(10_000 + count - index), newest - timedelta(hours=index))
            for index in range(count)
        ]

    return _feed
