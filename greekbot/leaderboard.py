"""XP levels, rank roles and the display pieces of the message leaderboard."""
from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "LevelInfo",
    "ROLE_ID_MEMBER",
    "ROLE_ID_ACTIVE_MEMBER",
    "ROLE_ID_ACTIVE_USER",
    "ROLE_ID_REALLY_ACTIVE_MEMBER",
    "ROLE_ID_USUAL_SUSPECT",
    "ROLE_ID_GREEK_LOVER",
    "ROLE_ID_PROESTOS",
    "ROLE_ID_EPITIMOS",
    "ROLE_ID_ELLINOPOULO",
    "ROLE_ID_PALIOS",
    "RANK_ROLE_IDS",
    "LEADERBOARD_HELP_TEXT",
    "calculate_level_info",
    "target_rank_role",
    "update_rank_roles",
    "medal",
    "xp_progress",
]

ROLE_ID_MEMBER = 350264923806367754
ROLE_ID_ACTIVE_MEMBER = 352008860904456192
ROLE_ID_ACTIVE_USER = 352009155864821760
ROLE_ID_REALLY_ACTIVE_MEMBER = 353354156783960075
ROLE_ID_USUAL_SUSPECT = 410753563543732225
ROLE_ID_GREEK_LOVER = 410754841556549633
ROLE_ID_PROESTOS = 414523335595130905
ROLE_ID_EPITIMOS = 466238555304230913
ROLE_ID_ELLINOPOULO = 608687509291008000
ROLE_ID_PALIOS = 631559446782410752

RANK_ROLE_IDS = (
    ROLE_ID_MEMBER,
    ROLE_ID_ACTIVE_MEMBER,
    ROLE_ID_ACTIVE_USER,
    ROLE_ID_REALLY_ACTIVE_MEMBER,
    ROLE_ID_USUAL_SUSPECT,
    ROLE_ID_GREEK_LOVER,
    ROLE_ID_PROESTOS,
    ROLE_ID_EPITIMOS,
    ROLE_ID_ELLINOPOULO,
    ROLE_ID_PALIOS,
)

# Minimum level for each rank role, highest first.
_LEVEL_ROLES = (
    (100, ROLE_ID_PALIOS),
    (70, ROLE_ID_ELLINOPOULO),
    (50, ROLE_ID_EPITIMOS),
    (40, ROLE_ID_PROESTOS),
    (35, ROLE_ID_GREEK_LOVER),
    (25, ROLE_ID_USUAL_SUSPECT),
    (20, ROLE_ID_REALLY_ACTIVE_MEMBER),
    (15, ROLE_ID_ACTIVE_MEMBER),
    (10, ROLE_ID_MEMBER),
    (6, ROLE_ID_ACTIVE_USER),
)

LEADERBOARD_HELP_TEXT = "Every minute that you're messaging, you randomly gain between 15 and 25 **XP**."


@dataclass(frozen=True)
class LevelInfo:
    """A member's level and the XP bounds of that level."""

    level: int
    level_xp: int
    next_level_xp: int


def calculate_level_info(xp: int) -> LevelInfo:
    """Work out the level reached with ``xp`` total experience."""
    level, level_xp, next_level_xp = 0, 0, 100
    while next_level_xp < xp:
        level += 1
        level_xp = next_level_xp
        next_level_xp += 5 * level * (level + 10) + 100
    return LevelInfo(level, level_xp, next_level_xp)


def target_rank_role(level: int) -> int:
    """The rank role that goes with ``level``, or 0 for none."""
    return next((role_id for minimum, role_id in _LEVEL_ROLES if level >= minimum), 0)


def _is_rank_role(role_id: int) -> bool:
    index = bisect_left(RANK_ROLE_IDS, role_id)
    return index < len(RANK_ROLE_IDS) and RANK_ROLE_IDS[index] == role_id


def update_rank_roles(role_ids: Iterable[int], target_role_id: int) -> list[int] | None:
    """Give a member exactly the rank role ``target_role_id`` (0 for none).

    Returns the member's new role list, or None when nothing has to change.
    """
    roles = [int(role_id) for role_id in role_ids]
    others = [role_id for role_id in roles if not _is_rank_role(role_id)]
    ranked = [role_id for role_id in roles if _is_rank_role(role_id)]

    if not ranked:
        if target_role_id == 0:
            return None
        return others + [target_role_id]
    if len(ranked) == 1:
        if target_role_id == 0:
            return others
        if ranked[0] != target_role_id:
            return others + [target_role_id]
        return None
    return others + ([target_role_id] if target_role_id != 0 else [])


def medal(rank: int) -> str:
    """The medal emoji shown next to a leaderboard rank."""
    return {1: "🥇", 2: "🥈", 3: "🥉"}.get(rank, "🏅")


def xp_progress(xp: int) -> str:
    """Progress through the current level as ``gained/needed``."""
    info = calculate_level_info(xp)
    return f"{xp - info.level_xp}/{info.next_level_xp - info.level_xp}"