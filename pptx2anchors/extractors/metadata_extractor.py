"""
Metadata & Theme Extractor
==========================

Reads document-level properties from ``docProps/core.xml`` and the color
scheme of the first theme part. Both functions are total: a missing or
malformed part produces the documented defaults and a log line, never an
exception.

Theme colors are "present or absent": a role whose color cannot be resolved
is left out of ``ThemeInfo.colors`` instead of defaulting to black.
"""

import logging
from datetime import datetime, timezone
from xml.etree import ElementTree as ET

from pptx2anchors.extractors.container import (
    CORE_PROPERTIES_PART,
    PptxArchive,
    list_theme_parts,
)
from pptx2anchors.extractors.data_types import (
    THEME_COLOR_ROLES,
    PptMetadata,
    ThemeInfo,
)
from pptx2anchors.extractors.util.ooxml import (
    A_CLRSCHEME,
    A_NS,
    A_SRGBCLR,
    A_SYSCLR,
    A_THEME,
    CP_KEYWORDS,
    DC_CREATOR,
    DC_SUBJECT,
    DC_TITLE,
    DCTERMS_CREATED,
    DCTERMS_MODIFIED,
    get_element_text,
)

logger = logging.getLogger(__name__)


def parse_timestamp(value: str | None, default: datetime) -> datetime:
    """Parse an ISO-8601 timestamp, returning ``default`` when it is missing or invalid."""
    if not value:
        return default
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Invalid timestamp in core properties: {value!r}")
        return default
    if parsed.tzinfo is None:
        # core properties are written in UTC
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def split_keywords(value: str | None) -> tuple[str, ...]:
    if not value:
        return ()
    return tuple(keyword.strip() for keyword in value.split(","))


def _scheme_color(role_elem: ET.Element) -> str | None:
    srgb = role_elem.find(A_SRGBCLR)
    if srgb is not None and srgb.get("val"):
        return f"#{srgb.get('val')}"
    sys_clr = role_elem.find(A_SYSCLR)
    if sys_clr is not None and sys_clr.get("lastClr"):
        return f"#{sys_clr.get('lastClr')}"
    return None


def extract_theme(archive: PptxArchive) -> ThemeInfo | None:
    """Read the color scheme of the first theme part, or None when there is none."""
    theme_parts = list_theme_parts(archive)
    if not theme_parts:
        return None

    try:
        root = ET.fromstring(archive.read_bytes(theme_parts[0]))
    except Exception as e:
        logger.warning(f"Could not extract theme info from {theme_parts[0]}: {e}")
        return None

    if root.tag != A_THEME:
        logger.warning(f"Unexpected theme root element {root.tag} in {theme_parts[0]}")
        return None

    colors: dict[str, str] = {}
    clr_scheme = next(root.iter(A_CLRSCHEME), None)
    if clr_scheme is not None:
        for role in THEME_COLOR_ROLES:
            role_elem = clr_scheme.find(f"{A_NS}{role}")
            if role_elem is None:
                continue
            if color := _scheme_color(role_elem):
                colors[role] = color

    return ThemeInfo(
        name=root.get("name") or "Default Theme",
        colors=colors,
        has_custom_backgrounds=len(theme_parts) > 1,
    )


def extract_metadata(archive: PptxArchive, slide_count: int) -> PptMetadata:
    """
    Extract presentation metadata from docProps/core.xml.

    Args:
        archive: The opened presentation.
        slide_count: Number of slides, copied into ``total_slides``.

    Returns:
        PptMetadata with title, author, dates, subject, keywords and theme.
        Defaults are used for anything that cannot be read.
    """
    logger.debug("Extracting metadata")
    now = datetime.now(timezone.utc)
    fallback = PptMetadata(
        created_date=now, modified_date=now, total_slides=slide_count
    )

    if not archive.exists(CORE_PROPERTIES_PART):
        logger.warning(f"{CORE_PROPERTIES_PART} not found, using default metadata")
        return fallback

    try:
        root = ET.fromstring(archive.read_bytes(CORE_PROPERTIES_PART))
    except Exception as e:
        logger.warning(f"Could not extract metadata: {e}")
        return fallback

    return PptMetadata(
        title=get_element_text(root, DC_TITLE) or fallback.title,
        author=get_element_text(root, DC_CREATOR) or fallback.author,
        created_date=parse_timestamp(get_element_text(root, DCTERMS_CREATED), now),
        modified_date=parse_timestamp(get_element_text(root, DCTERMS_MODIFIED), now),
        total_slides=slide_count,
        subject=get_element_text(root, DC_SUBJECT),
        keywords=split_keywords(get_element_text(root, CP_KEYWORDS)),
        theme=extract_theme(archive),
    )
