"""Data models for team partitioning.

A ``Record`` is one person read from the uploaded roster; a ``Team`` groups
records and tracks how many come from each company; a ``PartitionResult`` is
the full output of a build.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Models
# ---------------------------------------------------------------------------
class Record(BaseModel):
    """A single person with their company affiliation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)


class Team(BaseModel):
    """A team of records with its per-company head count.

    ``company_distribution`` must be kept in sync with ``members``; callers that
    edit ``members`` directly re-run ``recalculate`` afterwards.
    """

    id: int = Field(..., ge=1)
    members: list[Record] = Field(default_factory=list)
    company_distribution: dict[str, int] = Field(default_factory=dict)

    @property
    def size(self) -> int:
        return len(self.members)


class PartitionResult(BaseModel):
    """Teams produced by one build, plus the input summary."""

    teams: list[Team] = Field(default_factory=list)
    total_members: int = Field(default=0, ge=0)
    companies: list[str] = Field(default_factory=list)  # first-seen order
    unassigned: list[Record] = Field(default_factory=list)

    @property
    def assigned_members(self) -> int:
        """Number of records actually seated in a team."""
        return sum(team.size for team in self.teams)
