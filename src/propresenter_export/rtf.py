"""
Rich-Text Payloads

Builds the minimal Cocoa RTF document ProPresenter stores for every text
element and encodes it for embedding in the slide XML:

- pro6 profile: RTF -> UTF-8 -> base64, stored as plain element content
- legacy profile: raw RTF inside a CDATA section
"""

import base64

from loguru import logger

TITLE_FONT_SIZE = 140
BODY_FONT_SIZE = 120

RTF_HEADER = (
    "{\\rtf1\\ansi\\ansicpg1252\\cocoartf2709\n"
    "\\cocoatextscaling0\\cocoaplatform0{\\fonttbl\\f0\\fswiss\\fcharset0 Helvetica-Bold;}\n"
    "{\\colortbl;\\red255\\green255\\blue255;}\n"
    "{\\*\\expandedcolortbl;;}\n"
    "\\pard\\tx560\\tx1120\\tx1680\\tx2240\\tx2800\\tx3360\\tx3920\\tx4480"
    "\\tx5040\\tx5600\\tx6160\\tx6720\\pardirnatural\\qc\\partightenfactor0\n"
    "\n"
)


def escape_rtf(text: str) -> str:
    """Escape RTF control characters and turn newlines into paragraph breaks."""
    escaped = text.replace("\\", "\\\\").replace("{", "\\{").replace("}", "\\}")
    return escaped.replace("\n", "\\par\n")


def build_rtf(text: str, font_size: int = BODY_FONT_SIZE) -> str:
    """
    Wrap ``text`` in a one-font, one-color, centered, bold RTF document.

    ``font_size`` is the nominal unit; RTF's \\fs counts half-points so the
    document declares twice that value.
    """
    return f"{RTF_HEADER}\\f0\\b\\fs{font_size * 2} \\cf1 {escape_rtf(text)}}}"


def is_encodable(text: str) -> bool:
    """True when ``text`` survives a strict UTF-8 round trip."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def placeholder_rtf(font_size: int = BODY_FONT_SIZE) -> str:
    """Fixed payload used when a slide's text cannot be encoded."""
    return build_rtf("", font_size)


def encode_rtf(text: str, font_size: int = BODY_FONT_SIZE) -> str:
    """
    Build the RTF document for ``text`` and return it base64-encoded.

    Text that cannot be encoded as UTF-8 (lone surrogates) is replaced by
    the placeholder payload so one bad slide never aborts an export.
    """
    rtf = build_rtf(text, font_size)
    try:
        data = rtf.encode("utf-8")
    except UnicodeEncodeError as e:
        logger.warning(f"⚠️ RTF encoding failed, using placeholder: {e}")
        data = placeholder_rtf(font_size).encode("utf-8")
    return base64.b64encode(data).decode("ascii")


def wrap_cdata(payload: str) -> str:
    """Wrap ``payload`` in CDATA, splitting any embedded terminator."""
    return "<![CDATA[" + payload.replace("]]>", "]]]]><![CDATA[>") + "]]>"


def legacy_rtf(text: str, font_size: int = BODY_FONT_SIZE) -> str:
    """Raw RTF for the legacy profile, falling back like ``encode_rtf``."""
    if not is_encodable(text):
        logger.warning("⚠️ RTF encoding failed, using placeholder")
        return placeholder_rtf(font_size)
    return build_rtf(text, font_size)
