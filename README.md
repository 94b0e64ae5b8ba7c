# greekbot

This package holds the rules behind a chat bot for a Greek language-learning
community. The rules cover:

- banning and unbanning members,
- giving out level roles and self-service roles,
- running a starboard,
- logging voice activity,
- turning ISO 8601 timestamps into chat timestamp markup.

It also contains the small helpers that these rules depend on.

Every function takes plain values, such as ids, strings, datetimes and role
lists. Every function returns a decision or the text of a message.

## What this package does not do

The package has no networking code and no gateway or HTTP client. It has no
database and no command that starts a bot. You are responsible for:

- receiving events,
- storing leaderboard, starboard and ban records,
- sending the messages that these functions build.

## Modules

### `greekbot.utils`

- `crc32(value, text)` continues a CRC-32 checksum from `value` over `text`. A string is encoded as UTF-8 first. The result is unsigned.
- `base64_encode(data)` produces padded standard Base64.
- `base64_decode(text)` decodes standard Base64. Trailing padding may be left out. Invalid input raises `ValueError`.
- `percent_encode(text)` percent-encodes every character except the RFC 3986 unreserved ones.
- `parse_int(text, lower, upper)` parses the whole string as a decimal integer.
  - Malformed input raises `ValueError`.
  - A value outside `[lower, upper]` raises `OverflowError`.
  - The default range is that of a signed 32-bit integer.
- `random_between(a, b)` returns a uniform random number. For two integers the result is an integer in `[a, b]`. Otherwise it is a float in `[a, b)`.
- `parse_iso_timestamp(text)` parses a timestamp into an aware UTC `datetime`. It accepts:
  - the basic form: `YYYYMMDDThhmmss`, optionally followed by `Z`, `±hh` or `±hhmm`;
  - the extended form: `YYYY-MM-DDThh:mm:ss`, optionally followed by fractional seconds and then `Z` or `±hh:mm`.

  Precision is milliseconds. Invalid input raises `ValueError`.
- `format_iso_timestamp(moment)` writes `YYYY-MM-DDThh:mm:ss.ffffffZ`. A naive datetime is taken to be in UTC.
- `get_os()` returns `"Windows"`, `"macOS"`, `"Linux"`, `"FreeBSD"` or `"Unix"`.
- `get_executable_path()` returns the resolved path of the running program.
- `print_err`, `print_log`, `print_msg` and `print_dbg` write tagged, time-stamped lines. Each takes a `str.format` pattern followed by its arguments.

  | Function | Tag | Where it writes |
  | --- | --- | --- |
  | `print_err` | `ERR` | stderr |
  | `print_log` | `LOG` | stdout |
  | `print_msg` | `MSG` | stdout |
  | `print_dbg` | `DBG` | stdout, only when the `GREEKBOT_DEBUG` environment variable is set |

  `ERR` and `LOG` lines are also appended to a `.log` file next to the executable path.

### `greekbot.learning_greek`

Fixed ids and colours:

- `LMG_GUILD_ID`
- `LMG_CHANNEL_USER_LOG`
- `LMG_CHANNEL_STARBOARD`
- `LMG_EMOJI_HOLY`
- `LMG_COLOR_RED`
- `LMG_COLOR_GREEN`
- `LMG_COLOR_BLUE`

### `greekbot.ban`

- `parse_ban_duration(text, now)` returns a UTC midnight `datetime`, or `None` if the text is not understood. It accepts two kinds of input:
  - an absolute date in the form `YYYY-MM-DD`;
  - a duration made of non-zero `y`, `m`, `w` and `d` parts, such as `3m2d` or `1y5w`. The duration is added to `now` and rounded up to the next day boundary.
- `invalid_format_message(now)` returns the help text for an expiry string that could not be understood. The example date in the text is eight months after `now`.
- `no_ban_message(subcommand)` returns the reply for an attempt to ban the bot itself. Valid subcommands are `SUBCMD_USER`, `SUBCMD_TURK` and `SUBCMD_GREEK`.
- `resolve_reason_and_goodbye(subcommand, reason, goodbye)` returns the final reason and goodbye message:
  - the troll subcommands use fixed texts;
  - for the Greek subcommand, a goodbye is picked at random from `GREEK_GOODBYES`;
  - otherwise, an empty reason becomes `"Unspecified"` and an empty goodbye falls back to the reason.
- `parse_ban_modal_id(custom_id)` splits `user_id:avatar:username:discriminator` into a `BanTarget`.
- `unbanned_author_name(name)` turns `"... was banned"` into `"... was unbanned"`.
- `expiry_mention(expiry)` returns `<t:SECONDS:D>`, or `""` when `expiry` is `None`.

### `greekbot.leaderboard`

- `calculate_level_info(xp)` returns a `LevelInfo` with three values:
  - `level`;
  - `level_xp`, the XP at which the level starts;
  - `next_level_xp`, the XP needed for the next level.
- `xp_progress(xp)` returns progress through the current level as `"gained/needed"`.
- `target_rank_role(level)` returns the rank role for a level, or 0 if the level has none.
- `update_rank_roles(role_ids, target_role_id)` returns the member's new role list, leaving exactly that one rank role, or no rank role when the target is 0. It returns `None` if nothing has to change.
- `medal(rank)` returns the medal emoji for a rank.
- `RANK_ROLE_IDS` lists the rank roles. `LEADERBOARD_HELP_TEXT` is the help reply.

### `greekbot.roles`

- `toggle_role(selected_role_id, member_role_ids)` returns a `RoleToggle`, which holds a `RoleAction` and the reply text. The action is one of:
  - `ADDED`;
  - `REMOVED`;
  - `DENIED`: the poll role is only for natives.

  A role that cannot be selected raises `RoleSelectionError`.
- `proficiency_roles(member_role_ids, selected_role_id)` replaces the member's proficiency role with the selected one. Choosing Cyprus also grants Native.
- `booster_roles(member_role_ids, selected_role_id, is_boosting)` returns `(new_roles or None, reply or None)`. Colour roles are only given to members who are boosting the server. A selected id of 0 removes the colour role.

### `greekbot.starboard`

- `is_excluded_channel(channel_id)` tells whether reactions in a channel are ignored.
- `reaction_emoji(count)` returns the emoji for a reaction count. `REACTION_THRESHOLD` is 5.
- `starboard_content(count, channel_id, message_id)` returns the text of the starboard post.
- `tenor_gif_url(url)` turns a Tenor thumbnail link into a `.gif` link. It returns `None` for links that are not from Tenor.
- `pick_preview_attachments(attachments)` takes attachment mappings that have a `content_type` key. It returns the first image and the first video.
- `boring_remark(choice)` returns the quip for members with no starred messages. It picks one at random when `choice` is `None`.
- `STARBOARD_HELP_TEXT` is the help reply.

### `greekbot.timestamp`

- `timestamp_help_text()` returns the help reply for `/timestamp`.
- `format_timestamp_message(text, style="f")` returns `(content, is_error)`. On success, the content holds `<t:SECONDS:style>` followed by the same markup in a code block. On failure, it holds an error reply and `is_error` is true.

### `greekbot.voice_state`

`VoiceState.from_json(data)` builds a frozen `VoiceState` from a gateway payload.

- A missing required field raises `KeyError`.
- A field of the wrong type raises `TypeError`.
- A snowflake that is absent, null or zero becomes `None`.

### `greekbot.guild`

- `GuildState(roles, voice_states)` keeps the guild's `Role`s and the voice states seen so far.
  - `roles()` returns the roles with the highest position first.
  - `member_color(role_ids)` returns the colour of the member's highest coloured role, or 0 if none of the roles has a colour.
  - `on_role_create`, `on_role_update` and `on_role_delete` keep the role list current.
  - `on_voice_state_update(state)` records a join, move or leave and returns a `VoiceLogEntry`. It returns `None` when there is nothing to log. States for other guilds are ignored.
- `route_component(custom_id)` returns a `ComponentAction` together with the snowflake that the id carries.
- `route_modal(custom_id)` returns a `ModalAction` together with the data that the id carries.
- Both routing functions raise `ValueError` for ids they do not recognise.
- `clear_response_text(count)` returns the reply to `/clear`.

## Example

```python
from greekbot.leaderboard import calculate_level_info, medal
from greekbot.timestamp import format_timestamp_message
from greekbot.utils import parse_iso_timestamp

print(calculate_level_info(150), medal(1))
print(parse_iso_timestamp("2023-12-25T15:36:00+03:00"))
print(format_timestamp_message("20231225T103600-02", "f"))
```

## Requirements

- Python 3.10 or newer.
- No third-party dependencies.
- The tests use pytest (`pip install .[test]`, then run `pytest`).