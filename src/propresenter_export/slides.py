"""
Slide Builder

Renders one chunk of text as an RVDisplaySlide holding a single full-bleed
RVTextElement. The element carries the text twice: escaped plain text for
search, and the rich-text payload ProPresenter actually displays.
"""

from typing import Optional

from .config import OutputProfile, PRO6
from .identifiers import generate_uuid
from .models import Slide
from .rtf import (
    BODY_FONT_SIZE,
    TITLE_FONT_SIZE,
    encode_rtf,
    is_encodable,
    legacy_rtf,
    wrap_cdata,
)
from .text import clean_text, escape_xml, label_for

SLIDE_TEMPLATE = """
    <RVDisplaySlide backgroundColor="0 0 0 1" enabled="1" highlightColor="0 0 0 0" hotKey="" label="{label}" notes="" slideType="1" sort_index="0" UUID="{slide_id}">
      <cues></cues>
      <displayElements>
        <RVTextElement displayName="Default" UUID="{element_id}" fromTemplate="1" persistent="1" typeID="0" displayDelay="0" locked="0" opacity="1" source="" verticalAlignment="1" adjustsHeightToFit="0" revealType="0" fillColor="0 0 0 0" strokeColor="0 0 0 1" strokeWidth="0" drawingFill="0" drawingStroke="0" shadowColor="0 0 0 1" shadowBlur="0" shadowOffset="0 0">
          <position x="96" y="54" width="1728" height="972" z="0"/>
          <effects/>
          <NSString name="PlainText">{plain_text}</NSString>
          <NSString name="RTFData">{rtf_data}</NSString>
        </RVTextElement>
      </displayElements>
    </RVDisplaySlide>"""


class SlideBuilder:
    """Builds slides for one output profile."""

    def __init__(self, profile: Optional[OutputProfile] = None):
        self.profile = profile or PRO6

    def _rtf_data(self, text: str, font_size: int) -> str:
        if self.profile.base64_rtf:
            return encode_rtf(text, font_size)
        return wrap_cdata(legacy_rtf(text, font_size))

    def build(self, text: str, is_title: bool = False) -> Slide:
        """Build one slide from ``text``; title slides use the larger font."""
        slide_id = generate_uuid()
        element_id = generate_uuid()
        font_size = TITLE_FONT_SIZE if is_title else BODY_FONT_SIZE

        # Unencodable text keeps the placeholder RTF; the plain copy is cleaned
        plain_text = clean_text(text)
        rtf_source = plain_text if is_encodable(text) else text

        label = escape_xml(label_for(plain_text))
        xml = SLIDE_TEMPLATE.format(
            label=label,
            slide_id=slide_id,
            element_id=element_id,
            plain_text=escape_xml(plain_text),
            rtf_data=self._rtf_data(rtf_source, font_size),
        )
        return Slide(
            id=slide_id,
            text=plain_text,
            is_title_slide=is_title,
            label=label,
            xml=xml,
        )
