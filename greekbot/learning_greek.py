"""Identifiers and colours of the Learning Greek guild."""

LMG_GUILD_ID = 350234668680871946

LMG_CHANNEL_USER_LOG = 469274019565142017
LMG_CHANNEL_STARBOARD = 978993330694266920

LMG_EMOJI_HOLY = 409075809723219969

LMG_COLOR_RED = 0xC43135
LMG_COLOR_GREEN = 0x248046
LMG_COLOR_BLUE = 0x0096FF