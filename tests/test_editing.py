"""Tests for team_mixer/engine/editing.py."""

import random

import pytest

from team_mixer.engine.editing import (
    move_member,
    place_member,
    remove_team,
    take_member,
    total_members,
)
from team_mixer.engine.partition import build
from team_mixer.errors import InvalidArgument
from team_mixer.team_models import Record, Team


@pytest.fixture
def teams():
    return [
        Team(
            id=1,
            members=[Record(name="Ana", company="A"), Record(name="Ben", company="B")],
            company_distribution={"A": 1, "B": 1},
        ),
        Team(
            id=2,
            members=[Record(name="Cid", company="B")],
            company_distribution={"A": 0, "B": 1},
        ),
        Team(id=3, members=[], company_distribution={"A": 0, "B": 0}),
    ]


class TestMoveMember:
    def test_moves_to_end_of_target(self, teams):
        updated = move_member(teams, 1, 0, 2)
        assert [m.name for m in updated[0].members] == ["Ben"]
        assert [m.name for m in updated[1].members] == ["Cid", "Ana"]

    def test_recalculates_both_teams(self, teams):
        updated = move_member(teams, 1, 0, 2)
        assert updated[0].company_distribution == {"B": 1}
        assert updated[1].company_distribution == {"B": 1, "A": 1}

    def test_total_unchanged(self, teams):
        updated = move_member(teams, 2, 0, 3)
        assert total_members(updated) == total_members(teams) == 3

    def test_same_team_is_noop(self, teams):
        updated = move_member(teams, 1, 1, 1)
        assert [m.name for m in updated[0].members] == ["Ana", "Ben"]

    def test_input_untouched(self, teams):
        move_member(teams, 1, 0, 2)
        assert teams[0].size == 2
        assert teams[1].size == 1

    def test_unknown_team(self, teams):
        with pytest.raises(InvalidArgument):
            move_member(teams, 1, 0, 9)
        with pytest.raises(InvalidArgument):
            move_member(teams, 9, 0, 1)

    def test_bad_member_index(self, teams):
        with pytest.raises(InvalidArgument):
            move_member(teams, 2, 5, 1)
        with pytest.raises(InvalidArgument):
            move_member(teams, 3, 0, 3)

    def test_move_out_of_built_teams(self):
        result = build(
            [Record(name=f"p{i}", company="AB"[i % 2]) for i in range(6)],
            3,
            rng=random.Random(4),
        )
        updated = move_member(result.teams, 1, 0, 2)
        assert [t.size for t in updated] == [2, 4]
        for team in updated:
            assert sum(team.company_distribution.values()) == team.size


class TestHoldingArea:
    def test_take_and_place(self, teams):
        remaining, held = take_member(teams, 1, 1)
        assert held == Record(name="Ben", company="B")
        assert total_members(remaining) == 2

        restored = place_member(remaining, 3, held)
        assert restored[2].members == [held]
        assert restored[2].company_distribution == {"B": 1}

    def test_place_duplicate_record(self, teams):
        updated = place_member(teams, 1, Record(name="Ana", company="A"))
        assert updated[0].company_distribution["A"] == 2


class TestRemoveTeam:
    def test_removes_empty_team(self, teams):
        updated = remove_team(teams, 3)
        assert [t.id for t in updated] == [1, 2]

    def test_ids_not_renumbered(self, teams):
        emptied, held = take_member(teams, 2, 0)
        updated = remove_team(emptied, 2)
        assert [t.id for t in updated] == [1, 3]
        assert held.name == "Cid"

    def test_rejects_non_empty_team(self, teams):
        with pytest.raises(InvalidArgument):
            remove_team(teams, 1)

    def test_rejects_unknown_team(self, teams):
        with pytest.raises(InvalidArgument):
            remove_team(teams, 42)
