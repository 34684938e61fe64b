"""
Text helpers for XML attribute/content values and archive file names.
"""

import re

from loguru import logger

XML_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    "'": "&apos;",
    '"': "&quot;",
}

_XML_SPECIAL = re.compile(r"[&<>'\"]")
_UNSAFE_FILE_CHARS = re.compile(r'[/\\?%*:|"<>]')
# Everything outside the XML 1.0 Char production
_XML_INVALID = re.compile("[^\t\n\r\u0020-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]")

LABEL_LENGTH = 20


def escape_xml(text: str) -> str:
    """Replace the five XML special characters with their named entities."""
    return _XML_SPECIAL.sub(lambda match: XML_ENTITIES[match.group(0)], text)


def clean_text(text: str) -> str:
    """
    Make ``text`` safe to store in a UTF-8 XML document.

    Characters UTF-8 cannot encode (lone surrogates) become '?', and control
    characters XML does not allow (form feeds, vertical tabs, ...) become
    spaces. Clean text is returned unchanged.
    """
    cleaned = text.encode("utf-8", "replace").decode("utf-8")
    cleaned = _XML_INVALID.sub(" ", cleaned)
    if cleaned != text:
        logger.warning(f"⚠️ Replaced characters that cannot be stored: {cleaned[:40]!r}")
    return cleaned


def sanitize_file_name(name: str) -> str:
    """Replace characters that are not allowed in file names with '-'."""
    return _UNSAFE_FILE_CHARS.sub("-", name)


def label_for(text: str, limit: int = LABEL_LENGTH) -> str:
    """First line of a slide's text, cut to ``limit`` characters."""
    return text.split("\n", 1)[0][:limit]
