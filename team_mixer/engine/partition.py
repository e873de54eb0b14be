"""Balanced team builder.

Splits a flat roster into teams of ``team_size`` (plus at most one smaller
remainder team) and spreads every company's people as evenly as possible:

1. Each company's members are shuffled and dealt ``company_total // num_teams``
   to every team (the ideal share), never past a team's capacity.
2. Leftovers go one at a time to the team with the fewest members of that
   company, then the most free seats, then the lowest index.
3. Each team's member list is shuffled.

Building is randomized; calling ``build`` again on the same input is how the
teams get reshuffled.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any, Protocol

from team_mixer.errors import InvalidArgument
from team_mixer.team_models import PartitionResult, Record, Team

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything that can shuffle a sequence in place uniformly at random.

    ``random.Random`` satisfies this protocol.
    """

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


# ---------------------------------------------------------------------------
# Team sizing
# ---------------------------------------------------------------------------
def count_teams(n_records: int, team_size: int) -> int:
    """Full teams plus one remainder team when the division is not exact."""
    full_teams, remainder = divmod(n_records, team_size)
    return full_teams + (1 if remainder else 0)


def team_capacity(team_index: int, num_teams: int, team_size: int, remainder: int) -> int:
    """Maximum members for the team at *team_index*.

    The last team is the remainder team and holds only *remainder* members
    when the roster does not divide evenly; every other team holds
    *team_size*.
    """
    if remainder > 0 and team_index == num_teams - 1:
        return remainder
    return team_size


def _group_by_company(records: Sequence[Record]) -> dict[str, list[Record]]:
    """Group records by company, keeping companies in first-seen order."""
    groups: dict[str, list[Record]] = {}
    for record in records:
        groups.setdefault(record.company, []).append(record)
    return groups


# ---------------------------------------------------------------------------
# Assignment passes
# ---------------------------------------------------------------------------
def assign_ideal_share(
    company: str,
    members: Sequence[Record],
    teams: list[Team],
    capacity_of: Callable[[int], int],
) -> list[Record]:
    """Deal each team its floor share of *members*; return the leftovers.

    A team already at capacity forfeits that slot; the member stays in line
    for the next team.
    """
    ideal = len(members) // len(teams)
    member_index = 0
    for team_index, team in enumerate(teams):
        if member_index >= len(members):
            break
        for _ in range(ideal):
            if member_index >= len(members):
                break
            if team.size < capacity_of(team_index):
                team.members.append(members[member_index])
                team.company_distribution[company] = team.company_distribution.get(company, 0) + 1
                member_index += 1
    return list(members[member_index:])


def assign_overflow(
    company: str,
    members: Sequence[Record],
    teams: list[Team],
    capacity_of: Callable[[int], int],
) -> list[Record]:
    """Seat leftover *members* one by one; return those that found no seat.

    The target is the open team with the fewest members of *company*, then
    the most free seats, then the lowest index. Once every team is full the
    remaining members are not seated.
    """
    for position, member in enumerate(members):
        open_teams = [
            (team_index, team)
            for team_index, team in enumerate(teams)
            if team.size < capacity_of(team_index)
        ]
        if not open_teams:
            return list(members[position:])
        _, target = min(
            open_teams,
            key=lambda item: (
                item[1].company_distribution.get(company, 0),
                -(capacity_of(item[0]) - item[1].size),
            ),
        )
        target.members.append(member)
        target.company_distribution[company] = target.company_distribution.get(company, 0) + 1
    return []


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def build(
    records: Sequence[Record],
    team_size: int,
    rng: RandomSource | None = None,
) -> PartitionResult:
    """Partition *records* into company-balanced teams of *team_size*.

    Args:
        records: People to place. Duplicates are treated as distinct people.
        team_size: Target members per team; must be a positive integer.
        rng: Random source used for both shuffles. Defaults to a fresh
            unseeded ``random.Random``.

    Returns:
        PartitionResult with zero-filled company distributions per team.

    Raises:
        InvalidArgument: If *team_size* is not a positive integer.
    """
    if isinstance(team_size, bool) or not isinstance(team_size, int) or team_size <= 0:
        raise InvalidArgument(f"team_size must be a positive integer, got {team_size!r}")

    if not records:
        return PartitionResult(teams=[], total_members=0, companies=[])

    if rng is None:
        rng = random.Random()

    groups = _group_by_company(records)
    companies = list(groups)
    num_teams = count_teams(len(records), team_size)
    remainder = len(records) % team_size

    def capacity_of(team_index: int) -> int:
        return team_capacity(team_index, num_teams, team_size, remainder)

    teams = [
        Team(id=i + 1, members=[], company_distribution={c: 0 for c in companies})
        for i in range(num_teams)
    ]

    unassigned: list[Record] = []
    for company in companies:
        members = list(groups[company])
        rng.shuffle(members)
        leftovers = assign_ideal_share(company, members, teams, capacity_of)
        logger.debug(
            "Company %s: %d members, %d left after ideal share",
            company, len(members), len(leftovers),
        )
        dropped = assign_overflow(company, leftovers, teams, capacity_of)
        if dropped:
            logger.warning(
                "No open team left for %d member(s) of %s; they are not seated",
                len(dropped), company,
            )
            unassigned.extend(dropped)

    for team in teams:
        rng.shuffle(team.members)

    logger.info(
        "Built %d team(s) from %d record(s) across %d company(ies), team_size=%d",
        num_teams, len(records), len(companies), team_size,
    )
    return PartitionResult(
        teams=teams,
        total_members=len(records),
        companies=companies,
        unassigned=unassigned,
    )
