"""Weekly meme contest command plugin."""

from __future__ import annotations

import logging
from typing import Optional

import hikari
import lightbulb

from memeweek.bot.services.contest_service import ContestService, parse_channel_id
from memeweek.bot.services.exceptions import ServiceError
from memeweek.bot.services.message_source import HikariMessageSource, resolve_text_channel
from memeweek.bot.services.models import Announcement
from memeweek.bot.utils.announcements import (
    COMMAND_FAILED_MESSAGE,
    NO_MESSAGES_MESSAGE,
    PROCESSING_MESSAGE,
    WINNERS_ANNOUNCED_MESSAGE,
    build_announcement,
    build_category_failure_notice,
)
from memeweek.shared.config import Settings, get_settings
from memeweek.shared.date_provider import DateProvider

logger = logging.getLogger(__name__)

# Create the plugin
plugin = lightbulb.Plugin("contest")


async def post_announcement(ctx: lightbulb.Context, announcement: Announcement) -> None:
    """Send an announcement as a follow-up, attaching its media."""
    if announcement.attachments:
        await ctx.respond(
            announcement.content,
            attachments=[hikari.URL(url) for url in announcement.attachments],
        )
    else:
        await ctx.respond(announcement.content)


async def run_contest(
    ctx: lightbulb.Context,
    settings: Optional[Settings] = None,
    date_provider: Optional[DateProvider] = None,
) -> None:
    """Collect this week's messages and announce both categories.

    Expects the interaction to be acknowledged already; everything here
    is sent as follow-ups. Configuration problems and an empty window are
    reported to the invoker and end the run. Anything else propagates.
    """
    if settings is None:
        settings = get_settings()

    try:
        channel_id = parse_channel_id(settings.meme_channel_id)
        channel = await resolve_text_channel(ctx.app, channel_id)
    except ServiceError as e:
        logger.warning(f"Contest not run [{e.error_code}]: {e}")
        await ctx.respond(e.get_user_message())
        return

    service = ContestService(
        HikariMessageSource(ctx.app.rest, channel.guild_id),
        settings,
        date_provider,
    )
    window = service.current_window()
    messages = await service.collect(channel_id, window)

    if not messages:
        await ctx.respond(NO_MESSAGES_MESSAGE)
        return

    for category in service.categories:
        try:
            announcement = build_announcement(category, service.rank(messages, category))
        except Exception:
            logger.exception(f"Failed to compute winners for {category.key}")
            announcement = build_category_failure_notice(category)
        await post_announcement(ctx, announcement)

    await ctx.respond(WINNERS_ANNOUNCED_MESSAGE)


@plugin.command
@lightbulb.command("gettop", "Anuncia los ganadores del meme y el hueso de la semana")
@lightbulb.implements(lightbulb.SlashCommand)
async def gettop_command(ctx: lightbulb.Context) -> None:
    """Acknowledge, run the contest, and report any failure once.

    A failure after the acknowledgement edits the acknowledgement itself;
    winners already posted as follow-ups are left untouched.
    """
    acknowledgement: Optional[lightbulb.ResponseProxy] = None
    try:
        acknowledgement = await ctx.respond(PROCESSING_MESSAGE)
        await run_contest(ctx)
    except Exception:
        logger.exception("Error in /gettop")
        if acknowledgement is not None:
            await acknowledgement.edit(COMMAND_FAILED_MESSAGE)
        else:
            await ctx.respond(COMMAND_FAILED_MESSAGE)


def load(bot: lightbulb.BotApp) -> None:
    """Load the contest plugin."""
    bot.add_plugin(plugin)


def unload(bot: lightbulb.BotApp) -> None:
    """Unload the contest plugin."""
    bot.remove_plugin(plugin)
