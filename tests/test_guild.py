import pytest

from greekbot.guild import (
    COLOR_VOICE_JOIN,
    COLOR_VOICE_LEAVE,
    COLOR_VOICE_MOVE,
    ComponentAction,
    GuildState,
    ModalAction,
    Role,
    clear_response_text,
    route_component,
    route_modal,
)
from greekbot.learning_greek import LMG_GUILD_ID
from greekbot.voice_state import VoiceState


def _state(user_id, channel_id, guild_id=LMG_GUILD_ID):
    return VoiceState(user_id=user_id, session_id="session", guild_id=guild_id, channel_id=channel_id)


def _guild():
    return GuildState([
        Role(1, position=1, color=0xAA),
        Role(2, position=5, color=0),
        Role(3, position=3, color=0xBB),
    ])


def test_roles_sorted_by_position_descending():
    positions = [role.position for role in _guild().roles()]
    assert positions == sorted(positions, reverse=True)


def test_member_color_is_highest_coloured_role():
    guild = _guild()
    assert guild.member_color([1, 2, 3]) == 0xBB
    assert guild.member_color([1, 2]) == 0xAA
    assert guild.member_color([2]) == 0


def test_role_create_update_delete():
    guild = _guild()
    guild.on_role_create(Role(4, position=10, color=0xCC))
    assert guild.roles()[0].id == 4
    guild.on_role_update(Role(1, position=20, color=0xDD))
    assert guild.roles()[0] == Role(1, position=20, color=0xDD)
    assert len(guild.roles()) == 4
    guild.on_role_delete(1)
    assert [role.id for role in guild.roles()] == [4, 2, 3]


def test_role_update_of_unknown_role_appends():
    guild = _guild()
    guild.on_role_update(Role(9, position=0, color=0x11))
    assert guild.roles()[-1].id == 9


def test_voice_join_move_stay_leave():
    guild = GuildState()
    join = guild.on_voice_state_update(_state(7, 100))
    assert join.color == COLOR_VOICE_JOIN
    assert join.description == "<:vc_join:1253810834950586472> Joined <#100>"
    assert ("Channel ID", "`100`") in join.fields
    assert [s.channel_id for s in guild.voice_states] == [100]

    move = guild.on_voice_state_update(_state(7, 200))
    assert move.color == COLOR_VOICE_MOVE
    assert ("Old Channel ID", "`100`") in move.fields
    assert ("New Channel ID", "`200`") in move.fields

    assert guild.on_voice_state_update(_state(7, 200)) is None

    leave = guild.on_voice_state_update(_state(7, None))
    assert leave.color == COLOR_VOICE_LEAVE
    assert leave.description == "<:vc_leave:1253820278816112720> Left <#200>"
    assert guild.voice_states == []


def test_voice_leave_without_cached_state():
    guild = GuildState()
    entry = guild.on_voice_state_update(_state(7, None))
    assert entry.description == "<:vc_leave:1253820278816112720> Left a voice channel"
    assert entry.fields == (("User ID", "`7`"),)


def test_voice_other_guild_ignored():
    guild = GuildState()
    assert guild.on_voice_state_update(_state(7, 100, guild_id=12345)) is None
    assert guild.voice_states == []


def test_route_fixed_components():
    assert route_component("LEADERBOARD_HELP") == (ComponentAction.LEADERBOARD_HELP, None)
    assert route_component("STARBOARD_HELP") == (ComponentAction.STARBOARD_HELP, None)


@pytest.mark.parametrize("prefix, action", [
    ("BAN#", ComponentAction.UNBAN),
    ("DLT#", ComponentAction.DISMISS),
    ("NCK#", ComponentAction.NICKNAME),
    ("role:", ComponentAction.ROLE),
])
def test_route_prefixed_components(prefix, action):
    assert route_component(f"{prefix}469239964119597056") == (action, 469239964119597056)


def test_route_unknown_component_raises():
    with pytest.raises(ValueError, match="Unknown component id"):
        route_component("nonsense")


def test_route_modal():
    assert route_modal("ban:1:abc:name:0") == (ModalAction.BAN, "1:abc:name:0")
    assert route_modal("NICKNAME_MODAL") == (ModalAction.NICKNAME, None)
    with pytest.raises(ValueError, match="Unknown modal id"):
        route_modal("other")


def test_clear_response_text():
    assert clear_response_text(0) == "There are no messages to delete."
    assert clear_response_text(1) == "I deleted **1** message<a:mop:1255169498051379361>"
    assert clear_response_text(5) == "I deleted **5** messages<a:mop:1255169498051379361>"