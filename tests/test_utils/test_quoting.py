"""Tests for shell quoting helpers."""

from vps_console.utils.shell import double_quote, quote_path


def test_quote_path_plain() -> None:
    assert quote_path("/var/log") == "/var/log"


def test_quote_path_with_spaces_and_quotes() -> None:
    assert quote_path("/srv/it's here") == "'/srv/it'\"'\"'s here'"


def test_double_quote_plain() -> None:
    assert double_quote("/home/admin") == '"/home/admin"'


def test_double_quote_escapes_specials() -> None:
    assert double_quote('a"b') == '"a\\"b"'
    assert double_quote("$HOME") == '"\\$HOME"'
    assert double_quote("`id`") == '"\\`id\\`"'
    assert double_quote("a\\b") == '"a\\\\b"'


def test_double_quote_leaves_spaces_and_single_quotes() -> None:
    assert double_quote("/srv/it's here") == "\"/srv/it's here\""
