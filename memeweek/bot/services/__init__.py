"""Contest services package.

Window resolution, history collection and reaction ranking, kept free of
Discord types apart from the hikari-backed message source.
"""

from .contest_service import ContestService, build_categories, parse_channel_id
from .contest_window import resolve_contest_window
from .message_collector import MessageSource, collect_messages_in_window
from .ranking import count_qualifying_reactions, rank_messages

__all__ = [
    "ContestService",
    "MessageSource",
    "build_categories",
    "collect_messages_in_window",
    "count_qualifying_reactions",
    "parse_channel_id",
    "rank_messages",
    "resolve_contest_window",
]
