"""Tests for reaction counting and top-k ranking."""

from __future__ import annotations

from datetime import timedelta

import pytest

from memeweek.bot.services.models import ReactionCount, ReactionIdentifierSet
from memeweek.bot.services.ranking import count_qualifying_reactions, rank_messages

LAUGHS = ReactionIdentifierSet.of(["🤣", "😂"])
KEKW_ID = "954075635310035024"


@pytest.fixture
def monday(bogota_time):
    return bogota_time(2024, 1, 8, 10)


class TestQualifyingCount:
    """Test suite for per-message reaction counting."""

    def test_only_qualifying_reactions_count(self, make_message, monday):
        message = make_message("1", monday, {"🔥": 5, "🤣": 3})

        assert count_qualifying_reactions(message, LAUGHS) == 3

    def test_all_qualifying_reactions_are_summed(self, make_message, monday):
        message = make_message("1", monday, {"🤣": 4, "😂": 2, "👍": 10})

        assert count_qualifying_reactions(message, LAUGHS) == 6

    def test_custom_emoji_matches_by_id(self, make_message, monday):
        reactions = ReactionIdentifierSet.of(["🤣", KEKW_ID])
        message = make_message("1", monday, [ReactionCount(name="kekw", emoji_id=KEKW_ID, count=7)])

        assert count_qualifying_reactions(message, reactions) == 7

    def test_reaction_matching_name_and_id_counts_once(self, make_message, monday):
        reactions = ReactionIdentifierSet.of(["kekw", KEKW_ID])
        message = make_message("1", monday, [ReactionCount(name="kekw", emoji_id=KEKW_ID, count=7)])

        assert count_qualifying_reactions(message, reactions) == 7

    def test_message_without_reactions(self, make_message, monday):
        assert count_qualifying_reactions(make_message("1", monday), LAUGHS) == 0


class TestRankMessages:
    """Test suite for top-3 selection."""

    def test_top_three_in_descending_order(self, make_message, monday):
        messages = [
            make_message(str(index), monday + timedelta(minutes=index), {"🤣": count})
            for index, count in enumerate([4, 9, 1, 7, 3])
        ]

        winners = rank_messages(messages, LAUGHS)

        assert [winner.count for winner in winners] == [9, 7, 4]
        assert [winner.message.id for winner in winners] == ["1", "3", "0"]

    def test_messages_without_qualifying_reactions_are_excluded(self, make_message, monday):
        messages = [
            make_message("1", monday, {"🔥": 50, "👍": 20}),
            make_message("2", monday + timedelta(hours=1), {"😂": 1}),
        ]

        winners = rank_messages(messages, LAUGHS)

        assert [winner.message.id for winner in winners] == ["2"]

    def test_fewer_than_three_qualifying(self, make_message, monday):
        messages = [make_message("1", monday, {"🤣": 2}), make_message("2", monday, {"🦴": 2})]

        assert len(rank_messages(messages, LAUGHS)) == 1

    def test_empty_message_set(self):
        assert rank_messages([], LAUGHS) == []

    def test_empty_identifier_set(self, make_message, monday):
        messages = [make_message("1", monday, {"🤣": 2})]

        assert rank_messages(messages, ReactionIdentifierSet()) == []

    def test_custom_limit(self, make_message, monday):
        messages = [make_message(str(index), monday, {"🤣": index + 1}) for index in range(5)]

        assert [winner.count for winner in rank_messages(messages, LAUGHS, limit=1)] == [5]


class TestRankTieBreak:
    """Test suite for ordering among equal counts."""

    def test_earlier_message_wins_tie(self, make_message, monday):
        later = make_message("2", monday + timedelta(hours=2), {"🤣": 3})
        earlier = make_message("1", monday, {"🤣": 3})

        winners = rank_messages([later, earlier], LAUGHS)

        assert [winner.message.id for winner in winners] == ["1", "2"]

    def test_same_timestamp_keeps_input_order(self, make_message, monday):
        first = make_message("20", monday, {"🤣": 3})
        second = make_message("10", monday, {"🤣": 3})

        winners = rank_messages([first, second], LAUGHS)

        assert [winner.message.id for winner in winners] == ["20", "10"]

    def test_tie_at_cutoff_keeps_earliest(self, make_message, monday):
        messages = [
            make_message("4", monday + timedelta(hours=4), {"🤣": 2}),
            make_message("3", monday + timedelta(hours=3), {"🤣": 2}),
            make_message("2", monday + timedelta(hours=2), {"🤣": 2}),
            make_message("1", monday + timedelta(hours=1), {"🤣": 2}),
        ]

        winners = rank_messages(messages, LAUGHS)

        assert [winner.message.id for winner in winners] == ["1", "2", "3"]
