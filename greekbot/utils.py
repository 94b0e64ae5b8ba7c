"""General helpers: hashing, encodings, ISO 8601 timestamps, random numbers and logging."""
from __future__ import annotations

import base64
import os
import random
import re
import sys
import threading
import zlib
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import NoReturn, TextIO
from urllib.parse import quote

__all__ = [
    "crc32",
    "base64_encode",
    "base64_decode",
    "percent_encode",
    "parse_int",
    "random_between",
    "parse_iso_timestamp",
    "format_iso_timestamp",
    "get_os",
    "get_executable_path",
    "print_err",
    "print_log",
    "print_msg",
    "print_dbg",
]

_INT_RE = re.compile(r"-?[0-9]+")
_DIGITS_RE = re.compile(r"[0-9]+")
_EXTENDED_OFFSET_RE = re.compile(r"[+-]([0-9]{2}):([0-9]{2})")
_BASIC_OFFSET_RE = re.compile(r"[+-]([0-9]{2})([0-9]{2})?")

_B64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_B64_VALUES = {ch: index for index, ch in enumerate(_B64_ALPHABET)}

_ISO_ERROR = "Input string is not a valid ISO 8601 timestamp"

_DEBUG = bool(os.environ.get("GREEKBOT_DEBUG"))


# ---------------------------------------------------------------------------
# Hashing and encodings
# ---------------------------------------------------------------------------

def crc32(value: int, text: str | bytes) -> int:
    """Continue the CRC-32 checksum ``value`` over ``text`` (UTF-8 for strings)."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    return zlib.crc32(data, value) & 0xFFFFFFFF


def base64_encode(data: bytes | bytearray | memoryview) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(bytes(data)).decode("ascii")


def _sextet(ch: str) -> int:
    try:
        return _B64_VALUES[ch]
    except KeyError:
        raise ValueError("Input string is not valid base64") from None


def base64_decode(text: str | bytes) -> bytes:
    """Decode standard base64; trailing padding may be omitted."""
    if isinstance(text, (bytes, bytearray)):
        text = text.decode("latin-1")
    if not text:
        return b""
    tail = len(text) % 4 or 4
    if tail == 1:
        raise ValueError("Input string is not valid base64")
    body, last = text[:-tail], text[-tail:].ljust(4, "=")

    result = bytearray()
    for start in range(0, len(body), 4):
        value = 0
        for ch in body[start:start + 4]:
            value = (value << 6) | _sextet(ch)
        result += value.to_bytes(3, "big")

    a, b = _sextet(last[0]), _sextet(last[1])
    result.append(((a << 2) | (b >> 4)) & 0xFF)
    c_char, d_char = last[2], last[3]
    if c_char == "=" and d_char == "=":
        return bytes(result)
    c = _sextet(c_char)
    result.append(((b << 4) | (c >> 2)) & 0xFF)
    if d_char == "=":
        return bytes(result)
    d = _sextet(d_char)
    result.append(((c << 6) | d) & 0xFF)
    return bytes(result)


def percent_encode(text: str | bytes) -> str:
    """Percent-encode everything except the RFC 3986 unreserved characters."""
    return quote(text, safe="")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def parse_int(text: str, lower: int = -(2 ** 31), upper: int = 2 ** 31 - 1) -> int:
    """Parse a whole string as a decimal integer within ``[lower, upper]``.

    Raises ValueError for malformed input and OverflowError when out of range.
    """
    if not _INT_RE.fullmatch(text) or (lower >= 0 and text.startswith("-")):
        raise ValueError("Input string can't be parsed into an integer")
    value = int(text)
    if not lower <= value <= upper:
        raise OverflowError("Parsed integer is out of range")
    return value


def random_between(a: int | float, b: int | float) -> int | float:
    """Uniform random number: integers in ``[a, b]``, reals in ``[a, b)``."""
    if isinstance(a, int) and isinstance(b, int):
        return random.randint(a, b)
    if a > b:
        raise ValueError("Lower bound is greater than upper bound")
    return a + (b - a) * random.random()


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

def _fail() -> NoReturn:
    raise ValueError(_ISO_ERROR)


def parse_iso_timestamp(text: str) -> datetime:
    """Parse a basic or extended ISO 8601 timestamp into an aware UTC datetime.

    Precision is milliseconds; further fractional digits are ignored.
    """
    end = len(text)

    def char(index: int) -> str:
        return text[index] if 0 <= index < end else ""

    def digit(index: int) -> int:
        ch = char(index)
        if ch and "0" <= ch <= "9":
            return ord(ch) - ord("0")
        _fail()

    if end < 15:
        _fail()

    year = digit(0) * 1000 + digit(1) * 100 + digit(2) * 10 + digit(3)
    if char(4) == "-":
        extended_date = True
        month = digit(5) * 10 + digit(6)
        if char(7) != "-":
            _fail()
        day = digit(8) * 10 + digit(9)
        pos = 10
    else:
        extended_date = False
        month = digit(4) * 10 + digit(5)
        day = digit(6) * 10 + digit(7)
        pos = 8

    try:
        calendar_day = date(year, month, day)
    except ValueError:
        _fail()
    if char(pos) != "T":
        _fail()
    pos += 1

    hour = digit(pos) * 10 + digit(pos + 1)
    remaining = end - pos
    millis = 0
    if char(pos + 2) == ":" and remaining >= 8:
        extended_time = True
        minute = digit(pos + 3) * 10 + digit(pos + 4)
        if char(pos + 5) != ":":
            _fail()
        second = digit(pos + 6) * 10 + digit(pos + 7)
        pos += 8
        if end - pos > 1 and char(pos) == ".":
            fraction = _DIGITS_RE.match(text, pos + 1)
            if fraction:
                millis = int(fraction.group()[:3].ljust(3, "0"))
                pos = fraction.end()
    elif remaining >= 6:
        extended_time = False
        minute = digit(pos + 2) * 10 + digit(pos + 3)
        second = digit(pos + 4) * 10 + digit(pos + 5)
        pos += 6
    else:
        _fail()

    if extended_date != extended_time:
        _fail()
    if hour > 23 or minute > 59 or second > 59:
        _fail()

    moment = datetime(calendar_day.year, calendar_day.month, calendar_day.day, tzinfo=timezone.utc)
    moment += timedelta(hours=hour, minutes=minute, seconds=second, milliseconds=millis)

    rest = text[pos:]
    offset_hours = offset_minutes = 0
    plus = False
    if rest:
        if rest[0] == "Z":
            if len(rest) != 1:
                _fail()
        elif rest[0] in "+-":
            plus = rest[0] == "+"
            pattern = _EXTENDED_OFFSET_RE if extended_time else _BASIC_OFFSET_RE
            match = pattern.fullmatch(rest)
            if not match:
                _fail()
            offset_hours = int(match.group(1))
            offset_minutes = int(match.group(2) or 0)
        else:
            _fail()

    if offset_hours > 23 or offset_minutes > 59:
        _fail()
    offset = timedelta(hours=offset_hours, minutes=offset_minutes)
    try:
        return moment - offset if plus else moment + offset
    except OverflowError:
        _fail()


def format_iso_timestamp(moment: datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDThh:mm:ss.ffffffZ``; naive values count as UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return (
        f"{moment.year:04}-{moment.month:02}-{moment.day:02}"
        f"T{moment.hour:02}:{moment.minute:02}:{moment.second:02}"
        f".{moment.microsecond:06}Z"
    )


# ---------------------------------------------------------------------------
# Platform
# ---------------------------------------------------------------------------

def get_os() -> str:
    """Name of the operating system we're running on."""
    platform = sys.platform
    if platform == "win32":
        return "Windows"
    if platform == "darwin":
        return "macOS"
    if platform.startswith("linux"):
        return "Linux"
    if platform.startswith("freebsd"):
        return "FreeBSD"
    return "Unix"


def get_executable_path() -> Path:
    """Fully qualified path of the running program."""
    program = sys.argv[0] if sys.argv and sys.argv[0] not in ("", "-c", "-m") else sys.executable
    return Path(program).resolve()


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

class _Printer:
    """Serialises log output to the console and, for some tags, to a log file."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._logfile: TextIO | None = None

    def emit(self, tag: str, message: str, *, to_stderr: bool, to_log_file: bool) -> None:
        with self._lock:
            try:
                stamp = datetime.now().strftime("%d/%b/%Y %H:%M:%S [")
            except (ValueError, OverflowError, OSError):
                stamp = " " * 21 + "["
            line = f"{stamp}{tag}] {message}\n"
            stream = sys.stderr if to_stderr else sys.stdout
            try:
                stream.write(line)
                stream.flush()
            except (OSError, ValueError):
                pass
            if to_log_file:
                self._write_log(line)

    def _write_log(self, line: str) -> None:
        if self._logfile is None:
            try:
                self._logfile = open(
                    get_executable_path().with_suffix(".log"), "a", encoding="utf-8"
                )
            except OSError:
                return
        try:
            self._logfile.write(line)
            self._logfile.flush()
        except OSError:
            self._logfile.close()
            self._logfile = None


_printer = _Printer()


def _format(fmt: str, args: tuple) -> str:
    try:
        return fmt.format(*args)
    except (IndexError, KeyError, ValueError, AttributeError, TypeError):
        return ""


def print_err(fmt: str, *args: object) -> None:
    """Log an error to stderr and the log file."""
    _printer.emit("ERR", _format(fmt, args), to_stderr=True, to_log_file=True)


def print_log(fmt: str, *args: object) -> None:
    """Log a notable event to stdout and the log file."""
    _printer.emit("LOG", _format(fmt, args), to_stderr=False, to_log_file=True)


def print_msg(fmt: str, *args: object) -> None:
    """Print an informational message to stdout."""
    _printer.emit("MSG", _format(fmt, args), to_stderr=False, to_log_file=False)


def print_dbg(fmt: str, *args: object) -> None:
    """Print a debug message to stdout when GREEKBOT_DEBUG is set."""
    if _DEBUG:
        _printer.emit("DBG", _format(fmt, args), to_stderr=False, to_log_file=False)