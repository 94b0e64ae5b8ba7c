"""The /timestamp command: ISO 8601 timestamps turned into Discord mentions."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from greekbot.utils import parse_iso_timestamp

__all__ = ["timestamp_help_text", "format_timestamp_message"]

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_INTRO = (
    "Use this command to format an **ISO 8601** timestamp to a Discord format for messages. "
    "The accepted string specification is described as follows:"
)
_BASIC_FORMATS = (
    ("YYYYMMDDThhmmss", None),
    ("YYYYMMDDThhmmssZ", "UTC time"),
    ("YYYYMMDDThhmmss±hh", "Timezone offset"),
    ("YYYYMMDDThhmmss±hhmm", "Timezone offset"),
)
_EXTENDED_FORMATS = (
    ("YYYY-MM-DDThh:mm:ss", None),
    ("YYYY-MM-DDThh:mm:ssZ", "UTC time"),
    ("YYYY-MM-DDThh:mm:ss±hh:mm", "Timezone offset"),
)
_EXAMPLES = ("20231225T123600", "20231225T103600-02", "2023-12-25T15:36:00+03:00")


def _epoch_seconds(moment: datetime) -> int:
    return (moment - _EPOCH) // timedelta(seconds=1)


def _format_section(title: str, specs) -> list[str]:
    width = max(len(spec) for spec, _ in specs)
    lines = [f"## {title}"]
    for spec, note in specs:
        suffix = f" ({note})" if note else ""
        lines.append(f"- `{spec.ljust(width)}`{suffix}")
    return lines


def _build_help_text() -> str:
    lines = [_INTRO]
    lines += _format_section("Basic format", _BASIC_FORMATS)
    lines += _format_section("Extended format", _EXTENDED_FORMATS)
    lines.append("## Examples")
    lines += [f"- `{example}`" for example in _EXAMPLES]
    example_seconds = _epoch_seconds(parse_iso_timestamp(_EXAMPLES[0]))
    lines.append(f"All of the above describe <t:{example_seconds}:f>")
    return "\n".join(lines)


_HELP_TEXT = _build_help_text()


def timestamp_help_text() -> str:
    """The help text of the /timestamp command."""
    return _HELP_TEXT


def format_timestamp_message(text: str, style: str = "f") -> tuple[str, bool]:
    """Build the reply to a timestamp format request.

    Returns the message content and whether it is an error shown only to the
    invoking user.
    """
    try:
        moment = parse_iso_timestamp(text)
    except ValueError:
        return f"`{text}` is not a valid timestamp 💀 Try again!", True
    mention = f"<t:{_epoch_seconds(moment)}:{style}>"
    return f"{mention}\n```{mention}```", False