import pytest

from greekbot.timestamp import format_timestamp_message, timestamp_help_text


def test_help_text_mentions_example():
    text = timestamp_help_text()
    assert text.endswith("All of the above describe <t:1703507760:f>")
    assert "## Basic format\n" in text
    assert "## Extended format\n" in text


@pytest.mark.parametrize(
    "example",
    ["20231225T123600", "20231225T103600-02", "2023-12-25T15:36:00+03:00"],
)
def test_help_examples_agree(example):
    content, is_error = format_timestamp_message(example, "f")
    assert is_error is False
    assert content == "<t:1703507760:f>\n```<t:1703507760:f>```"


def test_style_is_used():
    content, is_error = format_timestamp_message("20231225T123600Z", "R")
    assert is_error is False
    assert content.startswith("<t:1703507760:R>")
    assert content.endswith("```<t:1703507760:R>```")


def test_default_style():
    content, _ = format_timestamp_message("2023-12-25T12:36:00Z")
    assert content.startswith("<t:1703507760:f>")


def test_milliseconds_are_floored():
    with_fraction, _ = format_timestamp_message("2023-12-25T12:36:00.999Z")
    without, _ = format_timestamp_message("2023-12-25T12:36:00Z")
    assert with_fraction == without


def test_invalid_timestamp():
    content, is_error = format_timestamp_message("not a timestamp", "f")
    assert is_error is True
    assert content == "`not a timestamp` is not a valid timestamp 💀 Try again!"


def test_mixed_formats_rejected():
    _, is_error = format_timestamp_message("2023-12-25T123600", "f")
    assert is_error is True