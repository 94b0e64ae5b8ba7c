"""Starboard rules: excluded channels, reaction counters and message previews."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from greekbot.learning_greek import LMG_GUILD_ID
from greekbot.utils import random_between

__all__ = [
    "REACTION_THRESHOLD",
    "EXCLUDED_CHANNELS",
    "STARBOARD_HELP_TEXT",
    "is_excluded_channel",
    "reaction_emoji",
    "starboard_content",
    "tenor_gif_url",
    "pick_preview_attachments",
    "boring_remark",
]

REACTION_THRESHOLD = 5

EXCLUDED_CHANNELS = frozenset({
    350234736754688020,   # #rules
    355242373380308993,   # #moderators
    363441099307483139,   # #announcements
    366366855117668383,   # #controversial
    469274019565142017,   # #user-log
    486311040477298690,   # #word-of-the-day
    539521989061378048,   # #message-log
    595658812128624670,   # #deepest-lore
    598873442288271423,   # #contributors
    611889781227520003,   # #travel-and-meetups
    618350374348390406,   # #bulletin-board
    627082548706541568,   # #moderators 📣
    630486369495679007,   # #rules-welcome
    645650220440485927,   # #faq
    645650358042886175,   # #faq-welcome
    650331739293745172,   # #native-polls
    672924470750478338,   # #moderation-log
    817078394331856907,   # #private-discussions
    1138145632134115348,  # #automod-channel
    1140760999331381260,  # #temp-friendos 📣
    1143284169502367805,  # #welcoming
    1143888492422770778,  # #new-members
})

STARBOARD_HELP_TEXT = (
    "When a message receives **5 or more** <:Holy:409075809723219969> reactions, "
    "it gets to appear in <#978993330694266920>. Reacting to *your own* messages doesn't count!"
)

_TENOR_PREFIX = "https://media.tenor.com/"

_REMARKS = ("Booooring!", "SAD!", "Meh...")
_LAST_REMARK = "Laaaaame!"


def is_excluded_channel(channel_id: int) -> bool:
    """Whether reactions in this channel are ignored by the starboard."""
    return int(channel_id) in EXCLUDED_CHANNELS


def reaction_emoji(count: int) -> str:
    """The emoji shown next to the reaction count of a starboard post."""
    if count == REACTION_THRESHOLD:
        return "<:Holy:409075809723219969>"
    if count == REACTION_THRESHOLD + 1:
        return "<:magik:1167594533849149450>"
    return "<a:spin:1167594572050866207>"


def starboard_content(count: int, channel_id: int, message_id: int) -> str:
    """The text of a starboard post linking back to the original message."""
    return (
        f"{reaction_emoji(count)} **{count}** "
        f"https://discord.com/channels/{LMG_GUILD_ID}/{channel_id}/{message_id}"
    )


def tenor_gif_url(url: str) -> str | None:
    """Turn a tenor thumbnail link into a link to the .gif file.

    Returns None for links that aren't tenor media.
    """
    if not url.startswith(_TENOR_PREFIX):
        return None
    slash = url.rfind("/")
    if slash < 1 or len(url) < 3:
        raise ValueError("Malformed tenor url")
    converted = url[:slash - 1] + "C" + url[slash:]
    return converted[:-3] + "gif"


def pick_preview_attachments(
    attachments: Iterable[Mapping[str, Any]],
) -> tuple[Mapping[str, Any] | None, Mapping[str, Any] | None]:
    """Find the first image and the first video among message attachments."""
    image = video = None
    for attachment in attachments:
        content_type = attachment.get("content_type") or ""
        if content_type.startswith("image/") and image is None:
            image = attachment
        elif content_type.startswith("video/") and video is None:
            video = attachment
        if image is not None and video is not None:
            break
    return image, video


def boring_remark(choice: int | None = None) -> str:
    """A remark for members whose messages were never starred.

    ``choice`` picks the remark; a random one is used when it is None.
    """
    if choice is None:
        choice = random_between(0, 3)
    if 0 <= choice < len(_REMARKS):
        return _REMARKS[choice]
    return _LAST_REMARK