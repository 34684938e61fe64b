"""Tests for the rich-text payload encoder."""

import base64

from propresenter_export.rtf import (
    RTF_HEADER,
    build_rtf,
    encode_rtf,
    escape_rtf,
    legacy_rtf,
    placeholder_rtf,
    wrap_cdata,
)


def test_escape_rtf_control_characters():
    assert escape_rtf("a\\b{c}") == "a\\\\b\\{c\\}"


def test_newlines_become_paragraphs():
    assert escape_rtf("one\ntwo") == "one\\par\ntwo"


def test_build_rtf_declares_double_font_size():
    rtf = build_rtf("Hello", 120)
    assert rtf.startswith(RTF_HEADER)
    assert rtf.endswith("\\f0\\b\\fs240 \\cf1 Hello}")
    assert "\\fs280 " in build_rtf("Title", 140)


def test_header_declares_font_color_alignment():
    assert "Helvetica-Bold" in RTF_HEADER
    assert "\\red255\\green255\\blue255" in RTF_HEADER
    assert "\\qc" in RTF_HEADER


def test_build_rtf_is_deterministic():
    text = "Größer\n{Refrain}\\"
    assert build_rtf(text, 120) == build_rtf(text, 120)
    assert encode_rtf(text, 120) == encode_rtf(text, 120)


def test_encode_rtf_is_base64_of_utf8():
    text = "Höher, höher"
    decoded = base64.b64decode(encode_rtf(text, 120)).decode("utf-8")
    assert decoded == build_rtf(text, 120)


def test_unencodable_text_uses_placeholder():
    payload = encode_rtf("broken \ud800 text", 120)
    assert base64.b64decode(payload).decode("utf-8") == placeholder_rtf(120)
    assert legacy_rtf("\udfff", 140) == placeholder_rtf(140)


def test_wrap_cdata_splits_terminator():
    assert wrap_cdata("plain") == "<![CDATA[plain]]>"
    assert wrap_cdata("a]]>b") == "<![CDATA[a]]]]><![CDATA[>b]]>"
