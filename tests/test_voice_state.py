from datetime import datetime, timezone

import pytest

from greekbot.voice_state import VoiceState


def _payload(**overrides):
    data = {
        "guild_id": "350234668680871946",
        "channel_id": "672924470750478338",
        "user_id": "80351110224678912",
        "session_id": "90326bd25d71d39b9ef95b299e3872ff",
        "deaf": False,
        "mute": True,
        "self_deaf": False,
        "self_mute": True,
        "self_video": False,
        "suppress": False,
        "request_to_speak_timestamp": None,
    }
    data.update(overrides)
    return data


def test_parses_required_fields():
    state = VoiceState.from_json(_payload())
    assert state.guild_id == 350234668680871946
    assert state.channel_id == 672924470750478338
    assert state.user_id == 80351110224678912
    assert state.session_id == "90326bd25d71d39b9ef95b299e3872ff"
    assert state.mute is True
    assert state.self_mute is True
    assert state.deaf is False


def test_optional_fields_default():
    data = _payload()
    del data["guild_id"]
    state = VoiceState.from_json(data)
    assert state.guild_id is None
    assert state.member is None
    assert state.self_stream is False
    assert state.request_to_speak_timestamp is None


def test_null_channel_means_disconnected():
    state = VoiceState.from_json(_payload(channel_id=None))
    assert state.channel_id is None


def test_self_stream_and_member():
    member = {"user": {"id": "80351110224678912", "username": "someone"}}
    state = VoiceState.from_json(_payload(self_stream=True, member=member))
    assert state.self_stream is True
    assert state.member == member


def test_request_to_speak_timestamp_is_parsed():
    state = VoiceState.from_json(_payload(request_to_speak_timestamp="2023-12-25T15:36:00+03:00"))
    assert state.request_to_speak_timestamp == datetime(2023, 12, 25, 12, 36, tzinfo=timezone.utc)


def test_missing_required_field_raises():
    data = _payload()
    del data["suppress"]
    with pytest.raises(KeyError):
        VoiceState.from_json(data)


def test_wrong_bool_type_raises():
    with pytest.raises(TypeError):
        VoiceState.from_json(_payload(deaf="yes"))


def test_invalid_snowflake_raises():
    with pytest.raises(ValueError):
        VoiceState.from_json(_payload(user_id="abc"))