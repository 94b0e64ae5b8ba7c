"""Cached state of the Learning Greek guild and interaction routing."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable

from greekbot.learning_greek import LMG_GUILD_ID
from greekbot.utils import crc32, parse_int
from greekbot.voice_state import VoiceState

__all__ = [
    "Role",
    "VoiceLogEntry",
    "GuildState",
    "ComponentAction",
    "ModalAction",
    "VOICE_LOG_CHANNEL_ID",
    "COLOR_VOICE_LEAVE",
    "COLOR_VOICE_JOIN",
    "COLOR_VOICE_MOVE",
    "FAIL_MESSAGE",
    "TEST_MESSAGE",
    "route_component",
    "route_modal",
    "clear_response_text",
]

VOICE_LOG_CHANNEL_ID = 672924470750478338

COLOR_VOICE_LEAVE = 0xE91D63
COLOR_VOICE_JOIN = 0x3598DC
COLOR_VOICE_MOVE = 0x9B59B6

FAIL_MESSAGE = "An unexpected error has occurred. Try again later."
TEST_MESSAGE = "Nothing to see here, go look elsewhere."

_CMP_ID_LEADERBOARD_HELP = 0x4ECEBDEC
_CMP_ID_STARBOARD_HELP = 0x33330ADE
_CMP_ID_PROFICIENCY_MENU = 0xAE90F56B
_CMP_ID_BOOSTER_MENU = 0x90DD7D88

_SNOWFLAKE_MAX = 2 ** 64 - 1


@dataclass(frozen=True)
class Role:
    """A guild role as far as ordering and colouring go."""

    id: int
    position: int
    color: int = 0
    name: str = ""


@dataclass(frozen=True)
class VoiceLogEntry:
    """An embed to post in the voice log channel."""

    color: int
    description: str
    fields: tuple[tuple[str, str], ...]


class GuildState:
    """Roles and voice states kept for the Learning Greek guild."""

    def __init__(self, roles: Iterable[Role] = (), voice_states: Iterable[VoiceState] = ()) -> None:
        self._roles: list[Role] = list(roles)
        self._sorted = False
        self.voice_states: list[VoiceState] = list(voice_states)

    def roles(self) -> list[Role]:
        """The guild's roles, highest position first."""
        if not self._sorted:
            self._roles.sort(key=lambda role: role.position, reverse=True)
            self._sorted = True
        return list(self._roles)

    def member_color(self, role_ids: Iterable[int]) -> int:
        """The colour of a member's highest coloured role, or 0 for none."""
        wanted = {int(role_id) for role_id in role_ids}
        return next(
            (role.color for role in self.roles() if role.id in wanted and role.color),
            0,
        )

    def on_role_create(self, role: Role) -> None:
        self._roles.append(role)
        self._sorted = False

    def on_role_update(self, role: Role) -> None:
        for index, existing in enumerate(self._roles):
            if existing.id == role.id:
                self._roles[index] = role
                break
        else:
            self._roles.append(role)
        self._sorted = False

    def on_role_delete(self, role_id: int) -> None:
        # Removing roles leaves the others in order, so the sorted flag stands.
        self._roles = [role for role in self._roles if role.id != role_id]

    def on_voice_state_update(self, state: VoiceState) -> VoiceLogEntry | None:
        """Record a voice state change and return what to log, if anything."""
        if state.guild_id != LMG_GUILD_ID:
            return None
        index = next(
            (i for i, cached in enumerate(self.voice_states) if cached.user_id == state.user_id),
            None,
        )
        fields = [("User ID", f"`{state.user_id}`")]
        if state.channel_id is None:
            if index is None:
                description = "<:vc_leave:1253820278816112720> Left a voice channel"
            else:
                old_channel = self.voice_states.pop(index).channel_id
                description = f"<:vc_leave:1253820278816112720> Left <#{old_channel}>"
                fields.append(("Channel ID", f"`{old_channel}`"))
            return VoiceLogEntry(COLOR_VOICE_LEAVE, description, tuple(fields))
        if index is None:
            self.voice_states.append(state)
            fields.append(("Channel ID", f"`{state.channel_id}`"))
            return VoiceLogEntry(
                COLOR_VOICE_JOIN,
                f"<:vc_join:1253810834950586472> Joined <#{state.channel_id}>",
                tuple(fields),
            )
        old_channel = self.voice_states[index].channel_id
        self.voice_states[index] = state
        if old_channel == state.channel_id:
            return None
        fields.append(("Old Channel ID", f"`{old_channel}`"))
        fields.append(("New Channel ID", f"`{state.channel_id}`"))
        return VoiceLogEntry(
            COLOR_VOICE_MOVE,
            f"<:vc_move:1253816785405349948> Moved from <#{old_channel}> to <#{state.channel_id}>",
            tuple(fields),
        )


class ComponentAction(enum.Enum):
    LEADERBOARD_HELP = "leaderboard_help"
    STARBOARD_HELP = "starboard_help"
    PROFICIENCY_MENU = "proficiency_menu"
    BOOSTER_MENU = "booster_menu"
    UNBAN = "unban"
    DISMISS = "dismiss"
    NICKNAME = "nickname"
    ROLE = "role"


class ModalAction(enum.Enum):
    BAN = "ban"
    NICKNAME = "nickname"


_FIXED_COMPONENTS = {
    _CMP_ID_LEADERBOARD_HELP: ComponentAction.LEADERBOARD_HELP,
    _CMP_ID_STARBOARD_HELP: ComponentAction.STARBOARD_HELP,
    _CMP_ID_PROFICIENCY_MENU: ComponentAction.PROFICIENCY_MENU,
    _CMP_ID_BOOSTER_MENU: ComponentAction.BOOSTER_MENU,
}

_PREFIXED_COMPONENTS = (
    ("BAN#", ComponentAction.UNBAN),
    ("DLT#", ComponentAction.DISMISS),
    ("NCK#", ComponentAction.NICKNAME),
    ("role:", ComponentAction.ROLE),
)


def route_component(custom_id: str) -> tuple[ComponentAction, int | None]:
    """Find the handler of a message component and the snowflake it carries.

    Raises ValueError for an unknown or malformed component id.
    """
    hash_value = crc32(0, custom_id)
    action = _FIXED_COMPONENTS.get(hash_value)
    if action is not None:
        return action, None
    for prefix, action in _PREFIXED_COMPONENTS:
        if custom_id.startswith(prefix):
            return action, parse_int(custom_id[len(prefix):], 0, _SNOWFLAKE_MAX)
    raise ValueError(f'Unknown component id "{custom_id}" 0x{hash_value:08X}')


def route_modal(custom_id: str) -> tuple[ModalAction, str | None]:
    """Find the handler of a submitted modal and the data its id carries.

    Raises ValueError for an unknown modal id.
    """
    if custom_id.startswith("ban:"):
        return ModalAction.BAN, custom_id[4:]
    if custom_id == "NICKNAME_MODAL":
        return ModalAction.NICKNAME, None
    raise ValueError(f'Unknown modal id "{custom_id}" 0x{crc32(0, custom_id):08X}')


def clear_response_text(count: int) -> str:
    """The reply to /clear after ``count`` messages were deleted."""
    if count == 0:
        return "There are no messages to delete."
    return f"I deleted **{count}** message{'' if count == 1 else 's'}<a:mop:1255169498051379361>"