"""Environment-driven defaults for building teams.

Reads TEAM_MIXER_TEAM_SIZE and TEAM_MIXER_SEED.
"""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Sequence

from team_mixer.engine.partition import build
from team_mixer.team_models import PartitionResult, Record

logger = logging.getLogger(__name__)

DEFAULT_TEAM_SIZE = 7


def get_team_size() -> int:
    """Team size from TEAM_MIXER_TEAM_SIZE, or ``DEFAULT_TEAM_SIZE``.

    Raises:
        ValueError: If the variable is set but not a positive integer.
    """
    raw = os.getenv("TEAM_MIXER_TEAM_SIZE", "").strip()
    if not raw:
        return DEFAULT_TEAM_SIZE
    try:
        size = int(raw)
    except ValueError as e:
        raise ValueError(f"TEAM_MIXER_TEAM_SIZE must be an integer, got {raw!r}") from e
    if size <= 0:
        raise ValueError(f"TEAM_MIXER_TEAM_SIZE must be positive, got {size}")
    return size


def get_seed() -> int | None:
    """Seed from TEAM_MIXER_SEED, or ``None`` when unset."""
    raw = os.getenv("TEAM_MIXER_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValueError(f"TEAM_MIXER_SEED must be an integer, got {raw!r}") from e


def create_random_source() -> random.Random:
    """A ``random.Random`` seeded from the environment when configured."""
    seed = get_seed()
    if seed is not None:
        logger.info("Using fixed shuffle seed %d", seed)
    return random.Random(seed)


def build_from_env(records: Sequence[Record]) -> PartitionResult:
    """``build`` with team size and random source taken from the environment."""
    return build(records, get_team_size(), rng=create_random_source())
