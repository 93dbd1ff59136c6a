"""
PPTX Presentation Extractor
===========================

Extracts slide titles, styled text, shape positions, speaker notes,
backgrounds, metadata and theme colors from Microsoft PowerPoint .pptx files
(Office Open XML format, PowerPoint 2007 and later).

This module uses direct XML parsing of the pptx ZIP archive structure, without
requiring the python-pptx library.

File Format Background
----------------------
The .pptx format is a ZIP archive containing XML files following the Office
Open XML (OOXML) standard. Parts read by this package:

    ppt/slides/slide1.xml, slide2.xml, ...: Individual slide content
    ppt/theme/theme1.xml, ...: Theme color schemes
    docProps/core.xml: Metadata (title, author, dates, keywords)

XML Namespaces:
    - p: http://schemas.openxmlformats.org/presentationml/2006/main
    - a: http://schemas.openxmlformats.org/drawingml/2006/main
    - r: http://schemas.openxmlformats.org/officeDocument/2006/relationships

Failure Model
-------------
Only a buffer that cannot be opened as a ZIP container fails the parse
(``InvalidFileFormatError`` and its subclasses). Everything below that level
degrades to documented defaults:

    - an unreadable or malformed slide becomes ``PptSlide.fallback``
    - missing style attributes use the ``TextStyle`` defaults
    - a missing background is reported as ``none``
    - missing core properties or theme parts use ``PptMetadata`` defaults

Slide Numbering
---------------
Slide numbers are 1-based and follow the number in the slide part name,
which matches what a viewer shows for decks that were saved normally. The
numbers are contiguous even when part numbers have gaps.

Usage
-----
    >>> from pptx2anchors.extractors.pptx_extractor import parse_pptx
    >>>
    >>> with open("slides.pptx", "rb") as f:
    ...     document = parse_pptx(f.read())
    >>> for slide in document.slides:
    ...     print(f"Slide {slide.slide_number}: {slide.title}")
"""

import io
import logging
import zipfile
import zlib
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Generator

from pptx2anchors.extractors.assembler import assemble
from pptx2anchors.extractors.container import (
    PptxArchive,
    list_slide_parts,
    open_archive,
)
from pptx2anchors.extractors.data_types import PptDocument
from pptx2anchors.extractors.metadata_extractor import extract_metadata
from pptx2anchors.extractors.slide_extractor import parse_slide
from pptx2anchors.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
)

logger = logging.getLogger(__name__)


def _read_slide_parts(archive: PptxArchive) -> list[tuple[int, bytes]]:
    """Read every slide part; a member that cannot be decompressed yields empty bytes."""
    parts = []
    for slide_number, part_name in list_slide_parts(archive):
        try:
            xml_bytes = archive.read_bytes(part_name)
        except (
            zipfile.BadZipFile,
            zlib.error,
            NotImplementedError,
            EOFError,
            OSError,
        ) as e:
            logger.warning(f"Failed to read {part_name}: {e}")
            xml_bytes = b""
        parts.append((slide_number, xml_bytes))
    return parts


def _parse_part(part: tuple[int, bytes]):
    slide_number, xml_bytes = part
    return parse_slide(xml_bytes, slide_number)


def parse_pptx(
    buffer: bytes,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    max_workers: int | None = None,
    source: str | None = None,
) -> PptDocument:
    """
    Parse a .pptx byte buffer into a PptDocument.

    Args:
        buffer: Complete content of the .pptx file.
        limits: ZIP-bomb limits checked before anything is decompressed.
        max_workers: When greater than 1, slides are parsed on a thread pool
            of this size. Results are joined in slide order either way.
        source: Optional name of the input, used in log and error messages.

    Returns:
        The assembled, immutable document.

    Raises:
        InvalidFileFormatError: The buffer is not a readable ZIP container.
        ExtractionFileEncryptedError: The presentation is password protected.
        ExtractionZipBombError: The archive exceeds ``limits``.
    """
    logger.debug("Reading pptx")

    with open_archive(buffer, limits=limits, source=source) as archive:
        parts = _read_slide_parts(archive)

        if max_workers is not None and max_workers > 1 and len(parts) > 1:
            with ThreadPoolExecutor(max_workers=max_workers) as executor:
                slides = list(executor.map(_parse_part, parts))
        else:
            slides = [_parse_part(part) for part in parts]

        metadata = extract_metadata(archive, len(slides))

    for slide in slides:
        logger.debug(f"Parsed slide {slide.slide_number}: {slide.title}")

    slide_mapping = {slide.slide_number: slide.slide_id for slide in slides}
    document = assemble(slides, metadata, slide_mapping)

    logger.info(
        "Extracted PPTX: %d slides, %d content elements",
        document.total_slides,
        sum(len(slide.content) for slide in document.slides),
    )
    return document


def read_pptx(
    file_like: io.BytesIO, path: str | None = None
) -> Generator[PptDocument, Any, None]:
    """
    Extract a presentation from a file-like object.

    This function uses a generator pattern so it can be driven the same way
    as ``read_file``, even though a .pptx holds exactly one presentation.

    Args:
        file_like: BytesIO object containing the complete PPTX file data.
            The stream position is reset to the beginning before reading.
        path: Optional path of the source file, used in log and error
            messages.

    Yields:
        PptDocument: The single parsed presentation.
    """
    file_like.seek(0)
    yield parse_pptx(file_like.read(), source=path)
