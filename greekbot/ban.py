"""Pure logic behind the ban, unban and temporary-ban commands."""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

from greekbot.utils import parse_int, random_between

__all__ = [
    "BanTarget",
    "SUBCMD_USER",
    "SUBCMD_TURK",
    "SUBCMD_GREEK",
    "MISSING_PERMISSION_MESSAGE",
    "TURK_GOODBYE",
    "GREEK_GOODBYES",
    "parse_ban_duration",
    "no_ban_message",
    "resolve_reason_and_goodbye",
    "parse_ban_modal_id",
    "invalid_format_message",
    "unbanned_author_name",
    "expiry_mention",
]

SUBCMD_USER = "user"
SUBCMD_TURK = "turk"
SUBCMD_GREEK = "greek"

MISSING_PERMISSION_MESSAGE = "You can't do that. You're missing the `BAN_MEMBERS` permission."

_NO_BAN_TURK = "Excuse me, ı'm not türk! Beep Bop... 🤖"
_NO_BAN_GREEK = "Όπα κάτσε, τι έκανα; Είμαι καλό μποτ εγώ. Beep Bop... 🤖"
_NO_BAN_DEFAULT = "I'm not gonna ban myself, I'm a good bot. Beep Bop... 🤖"

TURK_GOODBYE = (
    "senin ananı hacı bekir efendinin şalvarına dolar yan yatırır sokağındaki caminin minaresinde "
    "öyle bir sikerim ki ezan okundu sanırsın sonra minareden indirir koca yarrağımla köyünü yağmalar "
    "herkesi ortadox yaparım seni veled-i zina seni dljs;fjaiaejadklsjkfjdsjfklsdjflkjds;afdkslfdksfdlsfs"
)

GREEK_GOODBYES = (
    "Θα σε γαμήσω χιώτικα. Θα μυρίζει η σούφρα σου μαστίχα έναν χρόνο",
    "Αν η μαλακία ήταν γαρίφαλλο θα ήσουν επιτάφιος",
    "Δεν μπορώ να κλάσω αρκετά δυνατά για να σου απαντήσω όπως σου αρμόζει",
    "Ἔστιν οὖν τραγῳδία μίμησις πράξεως σπουδαίας καὶ τελείας, μέγεθος ἐχούσης, ἡδυσμένῳ λόγῳ, "
    "χωρὶς ἑκάστῳ τῶν εἰδῶν ἐν τοῖς μορίοις, δρώντων καὶ οὐ δι' ἀπαγγελίας, δι' ἐλέου καὶ φόβου "
    "περαίνουσα τὴν τῶν τοιούτων παθημάτων κάθαρσιν.",
    "Η αντιπρογιαγιά μου έκατσε στο σουλεϊμαν το μεγαλοπρεπή, ο προπάππους μου ήταν ο προσωπικός "
    "γιατρός του Κεμάλ Ατατούρκ, η προθεία μου η μεταφράστρια του πασά, είμαι ΑΕΚτζού χανούμισα, "
    "μου αρέσει το οθωμανικό, τα μουστάκια, οι φερετζέδες, τα belly dances, ο μπακλαβάς, το καρπούζι, "
    "το τζατζίκι, τα κεμπάπια, τα χαλιά, τα χάλια, η χλίδα, οι προστυχορυθμοί τους, τα τσιφτετέλια τους, "
    "το χαλούμι, το κανταΐφι, το ταου γιοξού, το τσανά καλέ, ο χαλβάς, ο καϊφές μερακλαντάν και "
    "σκέφτομαι να γίνω μουσουλμάνος, διότι κάνει καλό στη μέση.",
    "Άι μωρή μποχλάδω",
    "Την πέθανα, την σκότωσα την πουτάνα\n    \\- Ηλίας Ψινάκης",
    "Λοιπόν, ήρθε ο Πούρσας να με κάνει νταντά ντιέμ επειδή έκανα screenshot τα χόμο μηνύματα που μου "
    "έστελνε το Γατάκι. Όλο μιμς και πλακίτσα για άλλους αλλά μόλις σκάσει το ραντ πάνω τους το "
    "χιουμοράκι πάει περίπατο και αρχίζουν να κατεβάζουν μιουτς και μπανς. Και δώσε κλάμαααα οι "
    "σόυγιακς \"μου έκανε προσωπική επίθεση σνιφ σνιφ παλιοεντζλορντττ\". Μετά τις κωλοτούμπες στα "
    "γλωσσολογικά μόλις είπα ότι δεν γουστάρω ιμπεριαλιστές νεοθωμανούς γενοκτόνους εγκληματίες έβγαλες "
    "αιμορροίδες από το μπατχερτιλίκι και άρχισες τα καρενίστικα. Ούτε καν τους τύπους δεν κρατάς "
    "πλέον, το παίζεις και Πόντιος ξεφτιλισμένη ρεβιζιονιστική κατσαριδούλα. Φαίνεται από τα logs "
    "βέβαια πως τα ίδια κάνεις με όλους, μόλις κάποιος κάνει expose πόσο crackpots είστε. Αλλά τι "
    "λέμε τώρα, εδώ έχεις πει -χωρίς να ντρέπεσαι- πως \"δεν είναι δημοκρατικός ο σέρβερ\".",
    "Ρώτα τον wannabe σανταυμαρίτη καρπαζοεισπράκτορα να σου πει τι κάνουν οι πραγματικοί αριστεροί "
    "Σφακιώτες στο Σπανοχώρι σε πρακτορίσκους σαν εσένα. Δυο αργόσχολοι παρθένοι τσατάκηδες είστε εσύ "
    "και ο άλλος ο κλόουν που παπαγαλίζετε σαν στούρνοι ότι μαλακία δείτε στην lifo. Οπότε βούλωνε και "
    "μάθε τη θέση σου. Ο καλύτερος από εσάς το πολύ να κάνει κανένα ιδιαίτερο αύριο σε οθωμανικά "
    "mantrain για να ταϊσει την πουτάνα την μάνα του. Τώρα τράβα να με μπανάρεις παιδάκι και να μου "
    "κάνεις τα τρία δύο μην τυχόν και κόψει η κυκλομαλακία σας. Τουλάχιστον πλέον ξέρεις πως μόνο σε "
    "ανυποψίαστους ξένους περνάνε οι παπαριές σας.",
)

_UINT_MAX = 0xFFFFFFFF
_NUMBER_RE = re.compile(r"[0-9]+")
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Calendar-average unit lengths, in seconds.
_YEAR_SECONDS = 31556952
_MONTH_SECONDS = 2629746


@dataclass(frozen=True)
class BanTarget:
    """The user a ban modal refers to."""

    user_id: int
    avatar: str
    username: str
    discriminator: int


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def _read_uint(text: str, pos: int) -> tuple[int, int] | None:
    match = _NUMBER_RE.match(text, pos)
    if not match:
        return None
    value = int(match.group())
    if value > _UINT_MAX:
        return None
    return value, match.end()


def _ceil_day(moment: datetime) -> datetime:
    start = moment.replace(hour=0, minute=0, second=0, microsecond=0)
    return start if start == moment else start + timedelta(days=1)


def _parse_date(text: str, year: int) -> datetime | None:
    end = len(text)
    month_part = _read_uint(text, 5)
    if month_part is None:
        return None
    month, pos = month_part
    if pos - 5 != 2 or pos == end or text[pos] != "-":
        return None
    day_start = pos + 1
    day_part = _read_uint(text, day_start)
    if day_part is None or end - day_start != 2 or day_part[1] != end:
        return None
    try:
        day = date(year, month, day_part[0])
    except ValueError:
        return None
    return datetime(day.year, day.month, day.day, tzinfo=timezone.utc)


def _parse_duration(text: str, value: int, pos: int, now: datetime) -> datetime | None:
    end = len(text)
    units: dict[str, int] = {}
    while value != 0:
        unit = text[pos]
        if unit not in "ymwd" or unit in units:
            break
        units[unit] = value
        pos += 1
        if pos == end:
            try:
                delta = timedelta(
                    seconds=units.get("y", 0) * _YEAR_SECONDS + units.get("m", 0) * _MONTH_SECONDS,
                    weeks=units.get("w", 0),
                    days=units.get("d", 0),
                )
                return _ceil_day(now + delta)
            except OverflowError:
                return None
        following = _read_uint(text, pos)
        if following is None or following[1] == end:
            break
        value, pos = following
    return None


def parse_ban_duration(text: str, now: datetime) -> datetime | None:
    """Parse ``YYYY-MM-DD`` or a ``XXyXXmXXwXXd`` duration into a UTC midnight.

    Durations are added to ``now`` and rounded up to the next day boundary.
    Returns None when the text is not understood.
    """
    now = _as_utc(now)
    first = _read_uint(text, 0)
    if first is None:
        return None
    value, pos = first
    if pos == len(text):
        return None
    if text[pos] == "-" and pos == 4:
        return _parse_date(text, value)
    return _parse_duration(text, value, pos, now)


def no_ban_message(subcommand: str) -> str:
    """The reply for an attempt to ban the bot itself."""
    if subcommand == SUBCMD_TURK:
        return _NO_BAN_TURK
    if subcommand == SUBCMD_GREEK:
        return _NO_BAN_GREEK
    return _NO_BAN_DEFAULT


def resolve_reason_and_goodbye(subcommand: str, reason: str, goodbye: str) -> tuple[str, str]:
    """Fill in the ban reason and goodbye message that go with a subcommand."""
    if subcommand == SUBCMD_TURK:
        return "Turk troll", TURK_GOODBYE
    if subcommand == SUBCMD_GREEK:
        return "Greek troll", GREEK_GOODBYES[random_between(0, len(GREEK_GOODBYES) - 1)]
    if not reason:
        reason = "Unspecified"
    if not goodbye:
        goodbye = reason
    return reason, goodbye


def parse_ban_modal_id(custom_id: str) -> BanTarget:
    """Split a ``user_id:avatar:username:discriminator`` modal id.

    Raises ValueError for a malformed id and OverflowError for an
    out-of-range discriminator.
    """
    parts = custom_id.split(":", 3)
    if len(parts) != 4:
        raise ValueError("Invalid modal id")
    user_text, avatar, username, disc_text = parts
    user_id = parse_int(user_text, 0, 2 ** 64 - 1)
    discriminator = parse_int(disc_text, 0, 0xFFFF)
    return BanTarget(user_id, avatar, username, discriminator)


def _epoch_seconds(moment: datetime) -> int:
    return (_as_utc(moment) - _EPOCH) // timedelta(seconds=1)


def invalid_format_message(now: datetime) -> str:
    """The help text shown when a ban expiry string can't be understood."""
    example = _as_utc(now) + timedelta(seconds=8 * _MONTH_SECONDS)
    example = example.replace(microsecond=0)
    return (
        "Invalid format string!\n"
        "To specify a ban until a specific *future* date, specify a `YYYY-MM-DD` date.\n"
        "For example:\n"
        f"- `{example:%Y-%m-%d}`, for the ban to last until <t:{_epoch_seconds(example)}:D>\n"
        "To specify a ban as a duration, use any (non-zero) value combination of "
        "`y` years, `m` months, `w` weeks or `d` days.\n"
        "For example:\n"
        "- ` 25d`, for the ban to last for **25** days\n"
        "- `3m2d`, for the ban to last for **3** months and **2** days\n"
        "- `1y5w`, for the ban to last for **1** year and **5** weeks"
    )


def unbanned_author_name(name: str) -> str:
    """Turn a ``... was banned`` embed author into ``... was unbanned``."""
    index = name.rfind("banned")
    prefix = "User was " if index < 0 else name[:index]
    return f"{prefix}unbanned"


def expiry_mention(expiry: datetime | None) -> str:
    """A Discord date mention for a ban expiry, or an empty string for none."""
    if expiry is None:
        return ""
    return f"<t:{_epoch_seconds(expiry)}:D>"