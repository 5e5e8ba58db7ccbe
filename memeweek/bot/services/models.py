"""Service layer models for the contest bot.

This module defines immutable dataclasses for everything the contest
pipeline passes around. Discord objects are mapped into these models at
the edge so the window, collection and ranking logic never touch hikari
types directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from typing import Iterable

from memeweek.bot.services.exceptions import ValidationError


@dataclass(frozen=True)
class TimeWindow:
    """Half-open contest period ``[start, end)``.

    Both bounds are timezone-aware and expressed in the contest timezone.
    ``start == end`` is allowed and describes an empty window, which is
    what a query made exactly at the weekly boundary produces.
    """

    start: datetime
    end: datetime

    def __post_init__(self):
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValidationError("window", "Window bounds must be timezone-aware")
        if self.start > self.end:
            raise ValidationError("window", "Window start must not be after its end")

    def contains(self, instant: datetime) -> bool:
        """Check whether an instant falls in the window (start inclusive, end exclusive)."""
        return self.start <= instant < self.end

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@dataclass(frozen=True)
class MessageAttachment:
    """A media file attached to a message."""

    url: str
    filename: str


@dataclass(frozen=True)
class ReactionCount:
    """One reaction on a message.

    Unicode reactions only carry a name (the emoji itself); custom
    reactions carry both a name and the platform-assigned id.
    """

    name: str | None
    emoji_id: str | None
    count: int

    def __post_init__(self):
        if self.count < 0:
            raise ValidationError("count", "Reaction count cannot be negative")


@dataclass(frozen=True)
class ContestMessage:
    """Read-only view of a channel message relevant to the contest."""

    id: str
    created_at: datetime
    author_id: str
    author_mention: str
    author_name: str
    url: str
    attachments: tuple[MessageAttachment, ...] = ()
    reactions: tuple[ReactionCount, ...] = ()

    def __post_init__(self):
        if not self.id.strip():
            raise ValidationError("id", "Message ID is required")
        if self.created_at.tzinfo is None:
            raise ValidationError("created_at", "Message timestamp must be timezone-aware")

    @property
    def first_attachment(self) -> MessageAttachment | None:
        return self.attachments[0] if self.attachments else None


@dataclass(frozen=True)
class ReactionIdentifierSet:
    """Ordered set of reaction identifiers counted for one category.

    Each identifier is either a unicode emoji name or a custom emoji id.
    Duplicates are dropped while keeping first-seen order.
    """

    identifiers: tuple[str, ...] = ()

    @classmethod
    def of(cls, identifiers: Iterable[str]) -> ReactionIdentifierSet:
        ordered = dict.fromkeys(str(identifier) for identifier in identifiers)
        return cls(tuple(ordered))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self.identifiers

    def __len__(self) -> int:
        return len(self.identifiers)

    def matches(self, reaction: ReactionCount) -> bool:
        """Check whether a reaction qualifies by name or by id."""
        return (
            (reaction.name is not None and reaction.name in self)
            or (reaction.emoji_id is not None and reaction.emoji_id in self)
        )

    def isdisjoint(self, other: ReactionIdentifierSet) -> bool:
        return set(self.identifiers).isdisjoint(other.identifiers)


@dataclass(frozen=True)
class ContestCategory:
    """A contest run over the collected messages (e.g. meme of the week)."""

    key: str
    title: str
    emoji: str
    reactions: ReactionIdentifierSet = field(default_factory=ReactionIdentifierSet)

    def __post_init__(self):
        if not self.key.strip():
            raise ValidationError("key", "Category key is required")


@dataclass(frozen=True)
class ScoredMessage:
    """A message together with its qualifying reaction count."""

    message: ContestMessage
    count: int


@dataclass(frozen=True)
class Announcement:
    """A post ready to be sent: text plus attachment URLs."""

    content: str
    attachments: tuple[str, ...] = ()
