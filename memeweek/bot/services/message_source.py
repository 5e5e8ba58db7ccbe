"""Discord-backed message source built on the hikari REST client."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

import hikari

from memeweek.bot.services.exceptions import ChannelNotFoundError
from memeweek.bot.services.message_collector import MAX_PAGE_SIZE
from memeweek.bot.services.models import (
    ContestMessage,
    MessageAttachment,
    ReactionCount,
)

logger = logging.getLogger(__name__)


def to_reaction_count(reaction: hikari.Reaction) -> ReactionCount:
    """Map a hikari reaction to a name/id/count triple."""
    emoji = reaction.emoji
    if isinstance(emoji, hikari.CustomEmoji):
        return ReactionCount(name=emoji.name, emoji_id=str(emoji.id), count=reaction.count)
    return ReactionCount(name=str(emoji), emoji_id=None, count=reaction.count)


def to_contest_message(
    message: hikari.Message,
    guild_id: Optional[hikari.Snowflakeish] = None,
) -> ContestMessage:
    """Convert a hikari message into the contest model.

    Args:
        message: Message fetched from the channel history
        guild_id: Guild the channel belongs to, used for the jump link
            (REST history responses don't carry it)

    Returns:
        ContestMessage with author, link, attachments and reactions
    """
    author = message.author
    guild = guild_id if guild_id is not None else message.guild_id
    attachments: List[MessageAttachment] = [
        MessageAttachment(url=attachment.url, filename=attachment.filename)
        for attachment in message.attachments
    ]

    return ContestMessage(
        id=str(message.id),
        created_at=message.created_at,
        author_id=str(author.id),
        author_mention=author.mention,
        author_name=getattr(author, 'display_name', None) or author.username,
        url=message.make_link(guild),
        attachments=tuple(attachments),
        reactions=tuple(to_reaction_count(reaction) for reaction in message.reactions),
    )


async def resolve_text_channel(
    bot: hikari.GatewayBotAware,
    channel_id: int,
) -> hikari.TextableGuildChannel:
    """Find the contest channel, preferring the gateway cache.

    Raises:
        ChannelNotFoundError: If the channel doesn't exist, isn't visible
            to the bot, or can't hold messages
    """
    channel = bot.cache.get_guild_channel(channel_id)
    if channel is None:
        try:
            channel = await bot.rest.fetch_channel(channel_id)
        except (hikari.NotFoundError, hikari.ForbiddenError) as e:
            logger.warning(f"Could not fetch channel {channel_id}: {e}")
            raise ChannelNotFoundError(str(channel_id)) from e

    if not isinstance(channel, hikari.TextableGuildChannel):
        logger.warning(f"Channel {channel_id} is not a guild text channel ({type(channel).__name__})")
        raise ChannelNotFoundError(str(channel_id))

    return channel


class HikariMessageSource:
    """MessageSource implementation reading channel history over REST."""

    def __init__(self, rest: hikari.api.RESTClient, guild_id: Optional[hikari.Snowflakeish] = None):
        self._rest = rest
        self._guild_id = guild_id

    async def fetch_page(
        self,
        channel_id: int,
        *,
        limit: int = MAX_PAGE_SIZE,
        before: Optional[str] = None,
    ) -> Sequence[ContestMessage]:
        if before is None:
            history = self._rest.fetch_messages(channel_id)
        else:
            history = self._rest.fetch_messages(channel_id, before=hikari.Snowflake(before))

        messages = await history.limit(limit)
        return [to_contest_message(message, self._guild_id) for message in messages]
