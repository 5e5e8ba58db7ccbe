"""Announcement text for the weekly contest.

All user-visible strings of the contest command live here, in Spanish
like the rest of the community's channels.
"""

from __future__ import annotations

from typing import List, Sequence

from memeweek.bot.services.models import Announcement, ContestCategory, ScoredMessage

PROCESSING_MESSAGE = "Procesando mensajes, por favor espera..."
NO_MESSAGES_MESSAGE = "No se encontraron mensajes en el rango de fechas especificado."
WINNERS_ANNOUNCED_MESSAGE = "¡Ganadores anunciados!"
COMMAND_FAILED_MESSAGE = "¡Hubo un error al ejecutar este comando!"


def format_winner_line(rank: int, winner: ScoredMessage) -> str:
    message = winner.message
    return (
        f"**#{rank}** - Felicitaciones, {message.author_mention}! "
        f"Tu post ha ganado con {winner.count} reacciones. "
        f"[Ver mensaje]({message.url})"
    )


def build_no_winners_notice(category: ContestCategory) -> Announcement:
    return Announcement(content=f"No se encontraron ganadores para el \"{category.title}\".")


def build_category_failure_notice(category: ContestCategory) -> Announcement:
    """Notice posted when one category could not be computed."""
    return Announcement(content=f"No se pudieron calcular los ganadores del \"{category.title}\".")


def build_announcement(category: ContestCategory, winners: Sequence[ScoredMessage]) -> Announcement:
    """Build the winners post for one contest category.

    Args:
        category: Contest the winners belong to
        winners: Ranked winners, best first

    Returns:
        Announcement with one ranked line per winner and the first
        attachment of each winning message, or a "no winners" notice
    """
    if not winners:
        return build_no_winners_notice(category)

    lines: List[str] = [
        f"{category.emoji} **Ganadores del \"{category.title}\"** {category.emoji}",
        "",
    ]
    attachments: List[str] = []

    for rank, winner in enumerate(winners, start=1):
        lines.append(format_winner_line(rank, winner))
        attachment = winner.message.first_attachment
        if attachment is not None:
            attachments.append(attachment.url)

    return Announcement(content="\n".join(lines), attachments=tuple(attachments))
