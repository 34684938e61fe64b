"""Tests for identifiers, XML escaping and file-name helpers."""

import re

import pytest

from propresenter_export.identifiers import generate_uuid
from propresenter_export.text import clean_text, escape_xml, label_for, sanitize_file_name

UUID_PATTERN = re.compile(
    r"^[0-9A-F]{8}-[0-9A-F]{4}-4[0-9A-F]{3}-[89AB][0-9A-F]{3}-[0-9A-F]{12}$"
)


def unescape(text: str) -> str:
    for char, entity in [("<", "&lt;"), (">", "&gt;"), ("'", "&apos;"), ('"', "&quot;"), ("&", "&amp;")]:
        text = text.replace(entity, char)
    return text


# ── Identifiers ──────────────────────────────────────────────────────────

def test_uuid_layout():
    token = generate_uuid()
    assert len(token) == 36
    assert UUID_PATTERN.match(token), token


def test_uuids_are_unique():
    tokens = [generate_uuid() for _ in range(10_000)]
    assert len(set(tokens)) == len(tokens)
    assert all(UUID_PATTERN.match(token) for token in tokens)


# ── Escaping ─────────────────────────────────────────────────────────────

def test_escape_all_five_entities():
    assert escape_xml("<a href=\"x\">Tom & Jerry's</a>") == (
        "&lt;a href=&quot;x&quot;&gt;Tom &amp; Jerry&apos;s&lt;/a&gt;"
    )


@pytest.mark.parametrize(
    "text",
    ["Größer", "Psalm 23 (Lutherbibel 2017)", "EG 171, 1-4", "Ja, heute feiern wir!", ""],
)
def test_escape_leaves_safe_text_unchanged(text):
    assert escape_xml(text) == text
    assert escape_xml(escape_xml(text)) == text


@pytest.mark.parametrize(
    "text",
    ["a < b > c", "R&B", "\"quoted\" and 'single'", "&amp; already", "{}\\ ]]> \n\t"],
)
def test_escape_round_trips(text):
    escaped = escape_xml(text)
    assert not re.search(r"[<>'\"]", escaped)
    assert unescape(escaped) == text


# ── File names and labels ────────────────────────────────────────────────

def test_sanitize_replaces_reserved_characters():
    assert sanitize_file_name('AC/DC: "Live"?') == "AC-DC- -Live--"
    assert sanitize_file_name("a\\b%c*d|e<f>g") == "a-b-c-d-e-f-g"


def test_sanitize_keeps_other_characters():
    assert sanitize_file_name("Psalm 23 (Lutherbibel 2017)") == "Psalm 23 (Lutherbibel 2017)"


def test_label_uses_first_line_truncated():
    assert label_for("Amazing grace how sweet the sound\nthat saved") == "Amazing grace how sw"
    assert label_for("Short\nsecond line") == "Short"
    assert label_for("") == ""


# ── Characters XML cannot carry ──────────────────────────────────────────

@pytest.mark.parametrize(
    "text, expected",
    [
        ("Strophe 1\x0cSeite 2", "Strophe 1 Seite 2"),
        ("Zeile\x0bzwei", "Zeile zwei"),
        ("a\x00b\x1fc", "a b c"),
        ("a\ud800b", "a?b"),
    ],
)
def test_clean_text_replaces_unstorable_characters(text, expected):
    assert clean_text(text) == expected


def test_clean_text_keeps_valid_text():
    text = "Größer\tist\r\nder Herr 🙏"
    assert clean_text(text) == text


def test_escape_xml_leaves_control_characters_alone():
    assert escape_xml("a\x0cb") == "a\x0cb"
