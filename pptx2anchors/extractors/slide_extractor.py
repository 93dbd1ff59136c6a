"""
Slide XML Parser
================

Turns one ``ppt/slides/slideN.xml`` part into a ``PptSlide``.

Shapes (``p:sp``) directly under ``p:cSld/p:spTree`` are walked in document
order. Within a shape every paragraph (``a:p``) with text becomes one content
element, except the first non-empty paragraph of the first shape, which is
the slide title. Slides without any text get the title ``"Slide {n}"``.

``parse_slide`` never raises. A slide that cannot be parsed is logged and
replaced by ``PptSlide.fallback`` so one broken part does not abort the
whole presentation.

Known Limitations
-----------------
- Grouped shapes (``p:grpSp``) and tables are not descended into
- Pictures are not reported as content elements
- Speaker notes are only found when embedded in the slide part itself
"""

import logging
import re
from xml.etree import ElementTree as ET

from pptx2anchors.extractors.background_extractor import extract_background
from pptx2anchors.extractors.data_types import (
    PptSlide,
    ShapePosition,
    SlideContentElement,
)
from pptx2anchors.extractors.style_extractor import extract_style
from pptx2anchors.extractors.util.ooxml import (
    A_OFF,
    A_P,
    A_R,
    A_T,
    A_XFRM,
    P_CSLD,
    P_SLD,
    P_SLDID,
    P_SP,
    P_SPPR,
    P_SPTREE,
    P_TXBODY,
    R_ID,
)

logger = logging.getLogger(__name__)

_NOTES_RE = re.compile(r"<p:notes[^>]*>.*?</p:notes>", re.DOTALL)
_NOTES_TEXT_RE = re.compile(r"<a:t[^>]*>(.*?)</a:t>")
_TAG_RE = re.compile(r"<[^>]*>")


class SlidePartError(ValueError):
    """A slide part lacks the structure every slide must have."""


def extract_paragraph_text(paragraph: ET.Element) -> str:
    """Concatenate the text of all runs in a paragraph."""
    texts = []
    for run in paragraph.findall(A_R):
        t = run.find(A_T)
        texts.append((t.text or "") if t is not None else "")
    return "".join(texts)


def _to_int(value: str | None) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def extract_shape_position(shape: ET.Element) -> ShapePosition | None:
    sp_pr = shape.find(P_SPPR)
    xfrm = sp_pr.find(A_XFRM) if sp_pr is not None else None
    off = xfrm.find(A_OFF) if xfrm is not None else None
    if off is None:
        return None
    return ShapePosition(x=_to_int(off.get("x")), y=_to_int(off.get("y")))


def extract_slide_notes(xml_text: str) -> str:
    """
    Best-effort scan for speaker notes embedded in a slide part.

    Producers disagree on where notes live, so this is a text scan rather
    than a schema lookup.
    """
    try:
        notes_match = _NOTES_RE.search(xml_text)
        if notes_match is None:
            return ""
        texts = _NOTES_TEXT_RE.findall(notes_match.group(0))
        return " ".join(_TAG_RE.sub("", text) for text in texts)
    except Exception as e:
        logger.debug(f"Failed to extract notes: {e}")
        return ""


def _resolve_slide_id(root: ET.Element, slide_number: int) -> str:
    sld_id = root.find(P_SLDID)
    if sld_id is not None and (r_id := sld_id.get(R_ID)):
        return r_id
    return f"slide-{slide_number}"


def _parse_slide_root(root: ET.Element, xml_text: str, slide_number: int) -> PptSlide:
    if root.tag != P_SLD:
        raise SlidePartError(f"unexpected root element {root.tag}")
    c_sld = root.find(P_CSLD)
    if c_sld is None:
        raise SlidePartError("missing p:cSld")

    title = ""
    content: list[SlideContentElement] = []

    sp_tree = c_sld.find(P_SPTREE)
    shapes = sp_tree.findall(P_SP) if sp_tree is not None else []
    for index, shape in enumerate(shapes):
        tx_body = shape.find(P_TXBODY)
        if tx_body is None:
            continue
        position = extract_shape_position(shape)
        for paragraph in tx_body.findall(A_P):
            text = extract_paragraph_text(paragraph)
            if not text:
                continue
            if index == 0 and not title:
                title = text
                continue
            content.append(
                SlideContentElement(
                    type="text",
                    content=text,
                    style=extract_style(paragraph),
                    position=position,
                )
            )

    return PptSlide(
        slide_number=slide_number,
        slide_id=_resolve_slide_id(root, slide_number),
        title=title or f"Slide {slide_number}",
        content=tuple(content),
        notes=extract_slide_notes(xml_text),
        background=extract_background(c_sld),
    )


def parse_slide(xml_bytes: bytes, slide_number: int) -> PptSlide:
    """
    Parse one slide part.

    Args:
        xml_bytes: Raw content of ``ppt/slides/slideN.xml``.
        slide_number: 1-based position of the slide in the presentation.

    Returns:
        The parsed slide, or ``PptSlide.fallback(slide_number)`` when the
        part is not a readable slide.
    """
    logger.debug(f"Processing slide [{slide_number}]")
    try:
        root = ET.fromstring(xml_bytes)
        xml_text = xml_bytes.decode("utf-8", errors="replace")
        return _parse_slide_root(root, xml_text, slide_number)
    except Exception as e:
        logger.warning(f"Failed to parse slide {slide_number}: {e}")
        return PptSlide.fallback(slide_number)
