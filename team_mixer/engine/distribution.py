"""Per-team company distribution — recount after roster edits.

All functions are *pure*: they return new ``Team`` objects and leave the
input untouched.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from team_mixer.team_models import Team


def count_companies(team: Team) -> dict[str, int]:
    """Company → head count for *team*, in first-seen member order."""
    return dict(Counter(member.company for member in team.members))


def recalculate(teams: Sequence[Team]) -> list[Team]:
    """Rebuild every team's ``company_distribution`` from its members.

    Only companies with at least one member in a team get a key. This differs
    from ``build``, which zero-fills every company of the input; use
    ``fill_distribution`` when the zero entries are needed.
    """
    return [
        team.model_copy(
            update={
                "members": list(team.members),
                "company_distribution": count_companies(team),
            }
        )
        for team in teams
    ]


def fill_distribution(teams: Sequence[Team], companies: Iterable[str]) -> list[Team]:
    """Recalculate and zero-fill *companies* missing from each team.

    Known companies come first in the given order, followed by any company
    only present in the members.
    """
    known = list(companies)
    filled: list[Team] = []
    for team in recalculate(teams):
        counts = {c: team.company_distribution.get(c, 0) for c in known}
        for company, n in team.company_distribution.items():
            counts.setdefault(company, n)
        filled.append(team.model_copy(update={"company_distribution": counts}))
    return filled
