"""Shared fixtures for the export tests."""

import xml.etree.ElementTree as ET
from datetime import datetime, timezone

import pytest

from propresenter_export.models import ItemType, PlaylistEntry

TRANSLATION = "Lutherbibel 2017"


def parse_xml(xml: str) -> ET.Element:
    """Parse a generated document; fails the test if it is not well-formed."""
    return ET.fromstring(xml.encode("utf-8"))


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 17, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def example_entries():
    return [
        PlaylistEntry(type=ItemType.EVENT, title="Welcome"),
        PlaylistEntry(
            type=ItemType.SONG,
            title="Grace",
            content="Verse 1\nline two\n\n---\n\nChorus",
        ),
        PlaylistEntry(
            type=ItemType.SCRIPTURE,
            title="Psalm 23",
            content="1 Der HERR ist mein Hirte\n---\n2 Er weidet mich",
        ),
    ]
