"""
Text style extraction for DrawingML paragraphs.

Every function here is total: missing attributes fall back to the defaults
of ``TextStyle`` instead of raising.

Only the first run (``a:r``) of a paragraph is inspected. A bold word in the
middle of a sentence is therefore not reflected in the paragraph style.
"""

from xml.etree import ElementTree as ET

from pptx2anchors.extractors.data_types import (
    DEFAULT_COLOR,
    DEFAULT_FONT_FAMILY,
    DEFAULT_FONT_SIZE,
    Alignment,
    TextStyle,
)
from pptx2anchors.extractors.util.ooxml import (
    A_JC,
    A_LATIN,
    A_PPR,
    A_R,
    A_RPR,
    A_SOLIDFILL,
    A_SRGBCLR,
)

_ALIGNMENTS: dict[str, Alignment] = {
    "ctr": "center",
    "r": "right",
    "just": "justify",
}

_TRUE_VALUES = frozenset({"1", "true"})


def extract_color(fill: ET.Element | None) -> str:
    """
    Resolve an sRGB color from a fill-like element (``a:solidFill``, ``a:fgClr``, ...).

    Scheme colors, system colors and missing fills all yield the default black.
    """
    if fill is None:
        return DEFAULT_COLOR
    srgb = fill.find(A_SRGBCLR)
    if srgb is not None and (val := srgb.get("val")):
        return f"#{val}"
    return DEFAULT_COLOR


def extract_alignment(value: str | None) -> Alignment:
    return _ALIGNMENTS.get(value or "", "left")


def _paragraph_alignment(paragraph: ET.Element) -> Alignment:
    p_pr = paragraph.find(A_PPR)
    if p_pr is None:
        return "left"
    jc = p_pr.find(A_JC)
    if jc is not None and jc.get("val"):
        return extract_alignment(jc.get("val"))
    return extract_alignment(p_pr.get("algn"))


def extract_style(paragraph: ET.Element) -> TextStyle:
    """Derive the style of a paragraph from its first run."""
    alignment = _paragraph_alignment(paragraph)

    run = paragraph.find(A_R)
    r_pr = run.find(A_RPR) if run is not None else None
    if r_pr is None:
        return TextStyle(alignment=alignment)

    size = r_pr.get("sz")
    latin = r_pr.find(A_LATIN)
    typeface = latin.get("typeface") if latin is not None else None

    return TextStyle(
        font_size=f"{size}pt" if size else DEFAULT_FONT_SIZE,
        font_family=typeface or DEFAULT_FONT_FAMILY,
        color=extract_color(r_pr.find(A_SOLIDFILL)),
        bold=r_pr.get("b") in _TRUE_VALUES,
        italic=r_pr.get("i") in _TRUE_VALUES,
        alignment=alignment,
    )
