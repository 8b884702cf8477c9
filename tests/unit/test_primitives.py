from __future__ import annotations

from techsvg.render.icons import ICONS, get_icon_names
from techsvg.render.primitives import (
    card,
    clamp_lines,
    escape_html,
    icon,
    status,
    svg_document,
    title_bar,
    wrap_words,
)
from techsvg.render.themes import GITHUB_DARK, get_theme

COLORS = GITHUB_DARK.colors


def test_escape_html():
    assert escape_html("a < b & c > d") == "a &lt; b &amp; c &gt; d"
    assert escape_html(None) == ""


def test_wrap_words_is_greedy():
    assert wrap_words("one two three four", 9) == ["one two", "three", "four"]


def test_wrap_words_keeps_long_word_whole():
    assert wrap_words("supercalifragilistic ok", 5) == ["supercalifragilistic", "ok"]


def test_wrap_words_empty_text():
    assert wrap_words("", 10) == []


def test_clamp_lines_adds_ellipsis():
    assert clamp_lines(["aaaa", "bbbb", "cccc"], 2, 2) == ["aaaa", "bb..."]
    assert clamp_lines(["aaaa"], 2, 2) == ["aaaa"]


def test_title_bar_clamps_to_two_lines():
    text = " ".join(["word"] * 60)
    bar = title_bar(text, 700, 420, COLORS)
    assert bar.count("<text") == 2
    assert "..." in bar


def test_card_truncates_labels():
    fragment = card(0, 0, 100, 60, "server", "A very long label", COLORS, sublabel="a long sublabel text")
    assert "A very long " in fragment
    assert "A very long label" not in fragment
    assert "a long sublabel" in fragment
    assert "a long sublabel text" not in fragment


def test_status_unknown_state_uses_muted_color():
    assert COLORS.muted in status(0, 0, "weird", "hello", COLORS)


def test_unknown_icon_renders_nothing():
    assert icon("no-such-icon", 0, 0, 24, "#fff") == ""
    assert ICONS["server"] in icon("server", 0, 0, 24, "#fff")


def test_icon_names_cover_table():
    assert set(get_icon_names()) == set(ICONS)


def test_get_theme_falls_back():
    assert get_theme("missing") is GITHUB_DARK
    assert get_theme(None) is GITHUB_DARK
    assert get_theme("nord").name == "nord"


def test_svg_document_wraps_content():
    doc = svg_document(300, 200, COLORS, "<g/>")
    assert 'width="300" height="200"' in doc
    assert '<linearGradient id="bg"' in doc
    assert "<g/>" in doc
