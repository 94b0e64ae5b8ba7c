import base64
import re
import string
from datetime import datetime, timezone
from urllib.parse import unquote

import pytest

from greekbot import utils


@pytest.mark.parametrize(
    "text, expected",
    [
        ("user", 0x8D93D649),
        ("turk", 0x504AE1C8),
        ("greek", 0xA0F01AAE),
        ("rank", 0x8879E8E5),
        ("help", 0x08875CAC),
        ("format", 0xDEBA72DF),
        ("BAN_REASON", 0x23240F07),
    ],
)
def test_crc32_matches_source_hashes(text, expected):
    assert utils.crc32(0, text) == expected


def test_crc32_chains():
    assert utils.crc32(utils.crc32(0, "ab"), "cd") == utils.crc32(0, "abcd")
    assert utils.crc32(0, b"user") == utils.crc32(0, "user")


@pytest.mark.parametrize("data", [b"", b"f", b"fo", b"foo", b"foob", b"fooba", bytes(range(256))])
def test_base64_round_trip(data):
    encoded = utils.base64_encode(data)
    assert encoded == base64.b64encode(data).decode("ascii")
    assert utils.base64_decode(encoded) == data
    assert utils.base64_decode(encoded.rstrip("=")) == data


@pytest.mark.parametrize("text", ["Zm9vY", "Zm9v!mFy", "Z===", "Zm9v\u00e9mFy"])
def test_base64_decode_rejects_invalid(text):
    with pytest.raises(ValueError):
        utils.base64_decode(text)


def test_percent_encode_keeps_unreserved():
    text = string.ascii_letters + string.digits + "-._~"
    assert utils.percent_encode(text) == text


def test_percent_encode_space():
    assert utils.percent_encode("a b") == "a%20b"


@pytest.mark.parametrize("text", ["a b/c?d=e&f", "\u0395\u03bb\u03bb\u03b7\u03bd\u03b9\u03ba\u03ac", "100%"])
def test_percent_encode_round_trip(text):
    encoded = utils.percent_encode(text)
    assert unquote(encoded) == text
    assert re.fullmatch(r"[A-Za-z0-9\-._~%]*", encoded)


def test_parse_int_values():
    assert utils.parse_int("123") == 123
    assert utils.parse_int("-5") == -5
    assert utils.parse_int("65535", 0, 65535) == 65535


@pytest.mark.parametrize("text", ["", "12a", " 1", "+1", "1.5", "-"])
def test_parse_int_invalid(text):
    with pytest.raises(ValueError):
        utils.parse_int(text)


def test_parse_int_out_of_range():
    with pytest.raises(OverflowError):
        utils.parse_int(str(2 ** 31))
    with pytest.raises(OverflowError):
        utils.parse_int("65536", 0, 65535)


def test_parse_int_unsigned_rejects_minus():
    with pytest.raises(ValueError):
        utils.parse_int("-1", 0, 65535)


def test_random_between_integers_in_range():
    values = {utils.random_between(0, 3) for _ in range(300)}
    assert values <= {0, 1, 2, 3}
    assert all(isinstance(v, int) for v in values)


def test_random_between_reals_half_open():
    for _ in range(300):
        value = utils.random_between(1.5, 2.5)
        assert 1.5 <= value < 2.5


@pytest.mark.parametrize(
    "text",
    ["20231225T123600Z", "20231225T103600-02", "2023-12-25T15:36:00+03:00"],
)
def test_parse_iso_timestamp_source_examples(text):
    assert utils.parse_iso_timestamp(text).timestamp() == 1703507760


def test_parse_iso_timestamp_without_zone_is_utc():
    assert utils.parse_iso_timestamp("20231225T123600") == utils.parse_iso_timestamp("20231225T123600Z")


def test_parse_iso_timestamp_milliseconds():
    result = utils.parse_iso_timestamp("2023-12-25T12:36:00.123Z")
    assert result == datetime(2023, 12, 25, 12, 36, 0, 123000, tzinfo=timezone.utc)


def test_parse_iso_timestamp_extra_fraction_digits_ignored():
    assert utils.parse_iso_timestamp("2023-12-25T12:36:00.1234567Z") == utils.parse_iso_timestamp(
        "2023-12-25T12:36:00.123Z"
    )


def test_parse_iso_timestamp_basic_offset_with_minutes():
    assert utils.parse_iso_timestamp("20231225T150600+0230") == utils.parse_iso_timestamp("20231225T123600Z")


@pytest.mark.parametrize(
    "text",
    [
        "2023-12-25",
        "2023-12-25T123600",
        "20231225T12:36:00",
        "20231325T123600",
        "20231225T243600",
        "20231225T126000",
        "20231225 123600",
        "20231225T123600ZZ",
        "2023-12-25T12:36:00+03",
        "20231225T123600+3",
        "20231225T123600+2400",
        "20231225T123600.5",
        "abcd1225T123600",
    ],
)
def test_parse_iso_timestamp_rejects_invalid(text):
    with pytest.raises(ValueError):
        utils.parse_iso_timestamp(text)


def test_format_iso_timestamp():
    moment = datetime(2023, 12, 25, 12, 36, 0, 123456, tzinfo=timezone.utc)
    assert utils.format_iso_timestamp(moment) == "2023-12-25T12:36:00.123456Z"


def test_format_then_parse_round_trip():
    moment = datetime(2024, 2, 29, 23, 59, 58, 987000, tzinfo=timezone.utc)
    assert utils.parse_iso_timestamp(utils.format_iso_timestamp(moment)) == moment


def test_get_os_is_known_name():
    assert utils.get_os() in {"Windows", "macOS", "Linux", "FreeBSD", "Unix"}


def test_get_executable_path_is_absolute():
    assert utils.get_executable_path().is_absolute()


def test_print_msg_bad_format_prints_empty(capsys):
    utils.print_msg("{} {}", 1)
    out = capsys.readouterr().out
    assert out.endswith("[MSG] \n")