"""Discord bot client setup and configuration."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import hikari
import lightbulb

from memeweek.shared.config import Settings
from memeweek.shared.config import get_settings

logger = logging.getLogger(__name__)

PLUGINS = (
    "memeweek.bot.plugins.contest",
)


def bot_log_levels(settings: Settings) -> dict:
    """Logger levels for the bot; debug mode turns on DEBUG for hikari and lightbulb too."""
    if settings.debug:
        return {"hikari": "DEBUG", "lightbulb": "DEBUG", "memeweek": "DEBUG"}
    return {"hikari": "INFO", "lightbulb": "INFO", "memeweek": settings.log_level}


def create_bot(settings: Optional[Settings] = None) -> lightbulb.BotApp:
    """Create and configure the Discord bot with Lightbulb v2 syntax.

    Returns:
        BotApp instance for v2 compatibility
    """
    if settings is None:
        settings = get_settings()

    # Configure bot intents
    intents = (
        hikari.Intents.GUILDS
        | hikari.Intents.GUILD_MESSAGES  # For channel history
        | hikari.Intents.MESSAGE_CONTENT  # For attachments on fetched messages
        | hikari.Intents.GUILD_MESSAGE_REACTIONS  # For reaction counts
    )

    bot = lightbulb.BotApp(
        token=settings.discord_bot_token,
        intents=intents,
        logs={
            "version": 1,
            "incremental": True,
            "loggers": {
                name: {"level": level}
                for name, level in bot_log_levels(settings).items()
            },
        },
        banner=None,  # Disable banner for cleaner logs
    )

    return bot


def load_plugins(bot: lightbulb.BotApp) -> None:
    """Load bot plugins using Lightbulb v2 syntax."""
    for extension in PLUGINS:
        logger.info(f"Loading {extension}...")
        bot.load_extensions(extension)
        logger.info(f"✓ Loaded {extension}")


async def run_bot() -> None:
    """Run the Discord bot with Lightbulb v2 syntax."""
    settings = get_settings()

    if not settings.discord_bot_token:
        logger.error("Discord bot token not provided")
        return

    # Channel id is validated by /gettop itself
    if not settings.meme_channel_id:
        logger.warning("MEME_CHANNEL_ID is not set; /gettop will report the missing setting")

    bot = create_bot(settings)

    @bot.listen()
    async def on_starting(event: hikari.StartingEvent) -> None:
        logger.info("Bot is starting...")

    @bot.listen()
    async def on_started(event: hikari.StartedEvent) -> None:
        """Handle bot started event."""
        bot_user = event.app.get_me()
        if bot_user:
            logger.info(f"Bot started as {bot_user.username}")
        else:
            logger.info("Bot started")

    @bot.listen()
    async def on_stopping(event: hikari.StoppingEvent) -> None:
        logger.info("Bot is stopping...")

    load_plugins(bot)

    try:
        await bot.start()
        logger.info("Bot is now running. Press Ctrl+C to stop.")

        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            logger.info("Bot shutdown requested")

    except KeyboardInterrupt:
        logger.info("Bot shutdown requested via keyboard interrupt")
    except Exception as e:
        logger.error(f"Bot crashed: {e}")
        raise
    finally:
        logger.info("Shutting down bot...")
        await bot.close()
