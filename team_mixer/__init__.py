"""Balanced team maker: mixes people from different companies into teams."""

from .engine.distribution import fill_distribution, recalculate
from .engine.editing import move_member, place_member, remove_team, take_member
from .engine.partition import build, team_capacity
from .errors import InvalidArgument
from .team_models import PartitionResult, Record, Team

__all__ = [
    "InvalidArgument",
    "PartitionResult",
    "Record",
    "Team",
    "build",
    "fill_distribution",
    "move_member",
    "place_member",
    "recalculate",
    "remove_team",
    "take_member",
    "team_capacity",
]
