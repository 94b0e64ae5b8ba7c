"""Voice state objects as sent by the Discord gateway."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from greekbot.utils import parse_int, parse_iso_timestamp

__all__ = ["VoiceState"]

_SNOWFLAKE_MAX = 2 ** 64 - 1


def _snowflake(value: Any) -> int:
    if not isinstance(value, str):
        raise TypeError("Snowflake value must be a string")
    return parse_int(value, 0, _SNOWFLAKE_MAX)


def _optional_snowflake(value: Any) -> int | None:
    if value is None:
        return None
    snowflake = _snowflake(value)
    return snowflake or None


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise TypeError(f"Field {key!r} must be a boolean")
    return value


@dataclass(frozen=True)
class VoiceState:
    """A user's connection state to a voice channel."""

    user_id: int
    session_id: str
    guild_id: int | None = None
    channel_id: int | None = None
    member: Mapping[str, Any] | None = None
    deaf: bool = False
    mute: bool = False
    self_deaf: bool = False
    self_mute: bool = False
    self_stream: bool = False
    self_video: bool = False
    suppress: bool = False
    request_to_speak_timestamp: datetime | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "VoiceState":
        """Build a voice state from its JSON object.

        Raises KeyError for a missing required field and TypeError for a
        field of the wrong type.
        """
        if not isinstance(data, Mapping):
            raise TypeError("Voice state must be a JSON object")
        session_id = data["session_id"]
        if not isinstance(session_id, str):
            raise TypeError("Field 'session_id' must be a string")
        member = data.get("member")
        if member is not None and not isinstance(member, Mapping):
            raise TypeError("Field 'member' must be an object")
        self_stream = data.get("self_stream")
        if self_stream is not None and not isinstance(self_stream, bool):
            raise TypeError("Field 'self_stream' must be a boolean")
        timestamp = data["request_to_speak_timestamp"]
        if timestamp is not None and not isinstance(timestamp, str):
            raise TypeError("Field 'request_to_speak_timestamp' must be a string")
        return cls(
            user_id=_snowflake(data["user_id"]),
            session_id=session_id,
            guild_id=_optional_snowflake(data.get("guild_id")),
            channel_id=_optional_snowflake(data["channel_id"]),
            member=member,
            deaf=_bool(data, "deaf"),
            mute=_bool(data, "mute"),
            self_deaf=_bool(data, "self_deaf"),
            self_mute=_bool(data, "self_mute"),
            self_stream=bool(self_stream),
            self_video=_bool(data, "self_video"),
            suppress=_bool(data, "suppress"),
            request_to_speak_timestamp=None if timestamp is None else parse_iso_timestamp(timestamp),
        )