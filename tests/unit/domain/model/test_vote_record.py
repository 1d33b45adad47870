"""Unit tests for the VoteRecord toggle algorithm."""

from uuid import uuid4

import pytest

from qna.domain.model import VoteRecord
from qna.domain.value import UserId, VoteDirection


def _user() -> UserId:
    return UserId(uuid4())


class TestToggle:
    """Tests for VoteRecord.toggle()."""

    def test_first_upvote_is_cast(self):
        """Voting on a fresh record adds the user to upvoters."""
        user = _user()

        toggle = VoteRecord().toggle(user, VoteDirection.UP)

        assert toggle.record.upvoters == {user}
        assert toggle.record.score == 1
        assert toggle.previous is None
        assert toggle.current is VoteDirection.UP
        assert toggle.cast

    def test_same_direction_twice_returns_to_start(self):
        """Casting the same direction again retracts the vote."""
        user = _user()
        other = _user()
        start = VoteRecord(upvoters=frozenset({other}))

        once = start.toggle(user, VoteDirection.DOWN).record
        twice = once.toggle(user, VoteDirection.DOWN)

        assert twice.record == start
        assert twice.record.score == start.score
        assert twice.retracted
        assert twice.previous is VoteDirection.DOWN

    def test_switch_from_up_to_down_moves_score_by_two(self):
        """Upvote then downvote leaves the user only in downvoters."""
        user = _user()

        upvoted = VoteRecord().toggle(user, VoteDirection.UP).record
        switched = upvoted.toggle(user, VoteDirection.DOWN)

        assert user in switched.record.downvoters
        assert user not in switched.record.upvoters
        assert upvoted.score - switched.record.score == 2
        assert switched.previous is VoteDirection.UP
        assert switched.cast

    def test_user_never_in_both_sets(self):
        """Any sequence of toggles keeps the sets disjoint."""
        users = [_user() for _ in range(3)]
        record = VoteRecord()
        sequence = [VoteDirection.UP, VoteDirection.DOWN, VoteDirection.DOWN, VoteDirection.UP]

        for user in users:
            for direction in sequence:
                record = record.toggle(user, direction).record
                assert not record.upvoters & record.downvoters

    def test_direction_of(self):
        up, down, none = _user(), _user(), _user()
        record = VoteRecord(upvoters=frozenset({up}), downvoters=frozenset({down}))

        assert record.direction_of(up) is VoteDirection.UP
        assert record.direction_of(down) is VoteDirection.DOWN
        assert record.direction_of(none) is None


class TestInvariant:
    """Tests for the mutual-exclusivity validator."""

    def test_overlapping_sets_are_rejected(self):
        user = _user()

        with pytest.raises(ValueError, match="both upvote and downvote"):
            VoteRecord(upvoters=frozenset({user}), downvoters=frozenset({user}))

    def test_counts(self):
        record = VoteRecord(
            upvoters=frozenset({_user(), _user(), _user()}),
            downvoters=frozenset({_user()}),
        )

        assert record.upvote_count == 3
        assert record.downvote_count == 1
        assert record.score == 2
