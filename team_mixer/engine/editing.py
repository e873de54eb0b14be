"""Manual roster edits layered on top of ``recalculate``.

Each helper takes a team list, returns a new recalculated team list and
leaves the input untouched. Members are addressed by team id and position,
since duplicate records are legal.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from team_mixer.engine.distribution import recalculate
from team_mixer.errors import InvalidArgument
from team_mixer.team_models import Record, Team

logger = logging.getLogger(__name__)


def _find_team(teams: Sequence[Team], team_id: int) -> int:
    for position, team in enumerate(teams):
        if team.id == team_id:
            return position
    raise InvalidArgument(f"Unknown team id: {team_id}")


def _check_member_index(team: Team, member_index: int) -> None:
    if not 0 <= member_index < team.size:
        raise InvalidArgument(
            f"Team {team.id} has no member at index {member_index} (size {team.size})"
        )


def total_members(teams: Sequence[Team]) -> int:
    """Head count across all *teams*."""
    return sum(team.size for team in teams)


def take_member(
    teams: Sequence[Team],
    team_id: int,
    member_index: int,
) -> tuple[list[Team], Record]:
    """Remove one member from a team so the caller can hold it aside.

    Returns:
        (updated teams, the removed record).
    """
    position = _find_team(teams, team_id)
    source = teams[position]
    _check_member_index(source, member_index)

    record = source.members[member_index]
    updated = list(teams)
    updated[position] = source.model_copy(
        update={"members": [m for i, m in enumerate(source.members) if i != member_index]}
    )
    return recalculate(updated), record


def place_member(teams: Sequence[Team], team_id: int, record: Record) -> list[Team]:
    """Append *record* to the team with *team_id*."""
    position = _find_team(teams, team_id)
    target = teams[position]
    updated = list(teams)
    updated[position] = target.model_copy(update={"members": [*target.members, record]})
    return recalculate(updated)


def move_member(
    teams: Sequence[Team],
    source_team_id: int,
    member_index: int,
    target_team_id: int,
) -> list[Team]:
    """Move one member to the end of another team.

    Moving within the same team is a no-op (apart from recalculation).
    """
    _find_team(teams, target_team_id)
    if source_team_id == target_team_id:
        _check_member_index(teams[_find_team(teams, source_team_id)], member_index)
        return recalculate(teams)

    remaining, record = take_member(teams, source_team_id, member_index)
    logger.debug(
        "Moved %s (%s) from team %d to team %d",
        record.name, record.company, source_team_id, target_team_id,
    )
    return place_member(remaining, target_team_id, record)


def remove_team(teams: Sequence[Team], team_id: int) -> list[Team]:
    """Drop an empty team. Other team ids are left as they are.

    Raises:
        InvalidArgument: If the team is unknown or still has members.
    """
    position = _find_team(teams, team_id)
    if teams[position].size > 0:
        raise InvalidArgument(f"Team {team_id} still has {teams[position].size} member(s)")
    return recalculate([team for i, team in enumerate(teams) if i != position])
