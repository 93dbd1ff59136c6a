"""
Slide background extraction.

A slide background lives in ``p:cSld/p:bg``. Explicit fills sit in
``p:bgPr`` and are checked in OOXML fill precedence, first match wins:

    a:solidFill -> solid
    a:gradFill  -> gradient
    a:pattFill  -> pattern
    a:blipFill  -> image
    a:noFill    -> none

Backgrounds that only reference the theme (``p:bgRef``) report ``none``.

Transparency is read from the first ``a:alpha`` inside the fill. Its value is
on a 0-100000 opacity scale and is converted to a 0-100 transparency
percentage.
"""

import logging
import math
from xml.etree import ElementTree as ET

from pptx2anchors.extractors.data_types import (
    DEFAULT_COLOR,
    BackgroundStyle,
    GradientDirection,
)
from pptx2anchors.extractors.style_extractor import extract_color
from pptx2anchors.extractors.util.ooxml import (
    A_ALPHA,
    A_BGCLR,
    A_BLIP,
    A_BLIPFILL,
    A_FGCLR,
    A_GRADFILL,
    A_GS,
    A_GSLST,
    A_LIN,
    A_NOFILL,
    A_PATTFILL,
    A_SOLIDFILL,
    P_BG,
    P_BGPR,
    R_EMBED,
    R_LINK,
)

logger = logging.getLogger(__name__)

NO_BACKGROUND = BackgroundStyle(type="none")

_FULL_OPACITY = 100_000
# a:lin/@ang is expressed in 60000ths of a degree
_ANGLE_UNITS_PER_DEGREE = 60_000

DEFAULT_PATTERN_BACKGROUND = "#FFFFFF"


def extract_transparency(fill: ET.Element) -> int:
    alpha = next(fill.iter(A_ALPHA), None)
    if alpha is None:
        return 0
    try:
        val = int(alpha.get("val", _FULL_OPACITY))
    except ValueError:
        return 0
    # halves round up
    return math.floor((_FULL_OPACITY - val) / 1000 + 0.5)


def gradient_direction(angle: int) -> GradientDirection:
    """
    Classify a linear-gradient angle.

    Values below one degree's worth of OOXML units are taken as plain degrees.
    """
    if abs(angle) >= _ANGLE_UNITS_PER_DEGREE:
        degrees = angle / _ANGLE_UNITS_PER_DEGREE
    else:
        degrees = angle
    degrees = degrees % 360
    if degrees in (0, 180):
        return "horizontal"
    if degrees in (90, 270):
        return "vertical"
    return "diagonal"


def _stop_color(stop: ET.Element) -> str:
    # a:gs holds its color directly; some producers wrap it in a:solidFill
    solid_fill = stop.find(A_SOLIDFILL)
    return extract_color(solid_fill if solid_fill is not None else stop)


def _gradient_background(grad_fill: ET.Element) -> BackgroundStyle:
    gs_lst = grad_fill.find(A_GSLST)
    stops = gs_lst.findall(A_GS) if gs_lst is not None else []
    if not stops:
        return NO_BACKGROUND

    colors = [_stop_color(stop) for stop in stops]
    # black is what extract_color returns for stops it cannot resolve
    colors = [color for color in colors if color != DEFAULT_COLOR]

    direction: GradientDirection = "horizontal"
    lin = grad_fill.find(A_LIN)
    if lin is not None:
        try:
            direction = gradient_direction(int(lin.get("ang", "0")))
        except ValueError:
            direction = "diagonal"

    return BackgroundStyle(
        type="gradient",
        gradient_colors=tuple(colors),
        gradient_direction=direction,
        transparency=extract_transparency(grad_fill),
    )


def _pattern_background(patt_fill: ET.Element) -> BackgroundStyle:
    fg_clr = patt_fill.find(A_FGCLR)
    bg_clr = patt_fill.find(A_BGCLR)
    foreground = extract_color(fg_clr) if fg_clr is not None else DEFAULT_COLOR
    background = (
        extract_color(bg_clr) if bg_clr is not None else DEFAULT_PATTERN_BACKGROUND
    )
    return BackgroundStyle(
        type="pattern",
        pattern_type=patt_fill.get("prst") or "unknown",
        color=foreground,
        gradient_colors=(foreground, background),
        transparency=extract_transparency(patt_fill),
    )


def _image_background(blip_fill: ET.Element) -> BackgroundStyle:
    blip = blip_fill.find(A_BLIP)
    image_ref = None
    if blip is not None:
        image_ref = blip.get(R_EMBED) or blip.get(R_LINK)
    return BackgroundStyle(
        type="image",
        image_url=f"image-{image_ref}" if image_ref else None,
        transparency=extract_transparency(blip_fill),
    )


def _classify(bg_pr: ET.Element) -> BackgroundStyle:
    if (solid_fill := bg_pr.find(A_SOLIDFILL)) is not None:
        return BackgroundStyle(
            type="solid",
            color=extract_color(solid_fill),
            transparency=extract_transparency(solid_fill),
        )
    if (grad_fill := bg_pr.find(A_GRADFILL)) is not None:
        return _gradient_background(grad_fill)
    if (patt_fill := bg_pr.find(A_PATTFILL)) is not None:
        return _pattern_background(patt_fill)
    if (blip_fill := bg_pr.find(A_BLIPFILL)) is not None:
        return _image_background(blip_fill)
    if bg_pr.find(A_NOFILL) is not None:
        return NO_BACKGROUND
    return NO_BACKGROUND


def extract_background(c_sld: ET.Element | None) -> BackgroundStyle:
    """Classify the background fill of a ``p:cSld`` node. Never raises."""
    if c_sld is None:
        return NO_BACKGROUND
    try:
        bg = c_sld.find(P_BG)
        if bg is None:
            return NO_BACKGROUND
        bg_pr = bg.find(P_BGPR)
        if bg_pr is None:
            return NO_BACKGROUND
        return _classify(bg_pr)
    except Exception as e:
        logger.warning(f"Failed to extract background: {e}")
        return NO_BACKGROUND
