# tests/test_color_parsing.py

from __future__ import annotations

import importlib

import pytest

"""
parsing tests
=============

Does: Validate free-form color input parsing (hex, rgb()/tuple text, CSS names).
"""

ps = importlib.import_module("pantone_matcher.matching.color.utils.parsing")


@pytest.mark.parametrize(
    "text,expect",
    [
        ("rgb(12, 34, 56)", (12, 34, 56)),
        ("RGB(1,2,3)", (1, 2, 3)),
        ("(0,0,0)", (0, 0, 0)),
        ("[255, 128, 64]", (255, 128, 64)),
        ("7, 8, 9", (7, 8, 9)),
    ],
)
def test_parse_rgb_tuple_variants_ok(text, expect):
    assert ps.parse_rgb_tuple(text) == expect


@pytest.mark.parametrize("text", ["(999, 0, 0)", "no numbers here", "(10, -1, 10)", "1, 2"])
def test_parse_rgb_tuple_invalid(text):
    assert ps.parse_rgb_tuple(text) is None


@pytest.mark.parametrize(
    "name,expect",
    [("navy", (0, 0, 128)), ("RebeccaPurple", (102, 51, 153)), ("light-blue", (173, 216, 230))],
)
def test_rgb_from_css_name(name, expect):
    assert ps.rgb_from_css_name(name) == expect


def test_rgb_from_css_name_unknown():
    assert ps.rgb_from_css_name("pantone-ish") is None
    assert ps.rgb_from_css_name("   ") is None


@pytest.mark.parametrize(
    "text,expect",
    [
        ("#FF5733", (255, 87, 51)),
        ("  ff5733  ", (255, 87, 51)),
        ("F0A", (255, 0, 170)),
        # 3 hex digits win over a CSS reading
        ("add", (170, 221, 221)),
        ("rgb(95, 62, 255)", (95, 62, 255)),
        ("red", (255, 0, 0)),
    ],
)
def test_parse_color_input_ok(text, expect):
    assert ps.parse_color_input(text) == expect


@pytest.mark.parametrize("text", ["", "   ", "#GG0000", "FF00", "#FF000080", "blurple", None, 42])
def test_parse_color_input_invalid(text):
    assert ps.parse_color_input(text) is None
