"""
Container Reader
================

Opens a .pptx byte buffer as a ZIP archive and locates the parts the other
extractors consume:

    ppt/slides/slide1.xml, slide2.xml, ...: Individual slide content
    ppt/theme/theme1.xml, ...: Theme color schemes
    docProps/core.xml: Metadata (title, author, dates)

Slides are ordered by the number in their part name, not by the order of
the ZIP central directory, which producers do not keep numeric.

The signature check in ``validate`` is cheap and runs before any
decompression, so callers can reject uploads that are not ZIP containers
without paying for a full parse.
"""

import io
import logging
import re
import zipfile

from pptx2anchors.exceptions import (
    ExtractionFileEncryptedError,
    InvalidFileFormatError,
)
from pptx2anchors.extractors.util.encryption import (
    is_ole_container,
    is_ooxml_encrypted,
)
from pptx2anchors.extractors.util.zip_bomb import (
    DEFAULT_ZIP_BOMB_LIMITS,
    ZipBombLimits,
    open_zipfile,
)

logger = logging.getLogger(__name__)

ZIP_SIGNATURE = b"PK\x03\x04"
SIGNATURE_WINDOW = 8

CORE_PROPERTIES_PART = "docProps/core.xml"

_SLIDE_PART_RE = re.compile(r"^ppt/slides/slide(\d+)\.xml$")
_THEME_PART_RE = re.compile(r"^ppt/theme/theme(\d+)\.xml$")


def validate(buffer: bytes) -> bool:
    """True when the first bytes of the buffer carry the ZIP local-file-header signature."""
    if not buffer:
        return False
    return ZIP_SIGNATURE in bytes(buffer[:SIGNATURE_WINDOW])


class PptxArchive:
    """Read-only view of a .pptx ZIP container."""

    def __init__(
        self,
        buffer: bytes,
        *,
        limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
        source: str | None = None,
    ):
        self.source = source
        self._zip = open_zipfile(io.BytesIO(buffer), limits=limits, source=source)
        self._namelist = tuple(self._zip.namelist())

    @property
    def namelist(self) -> tuple[str, ...]:
        return self._namelist

    def exists(self, path: str) -> bool:
        return path in self._namelist

    def read_bytes(self, path: str) -> bytes:
        return self._zip.read(path)

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "PptxArchive":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def _reject(buffer: bytes, source: str | None) -> InvalidFileFormatError:
    file_like = io.BytesIO(buffer)
    if is_ole_container(file_like):
        if is_ooxml_encrypted(file_like):
            return ExtractionFileEncryptedError(
                "PowerPoint file is password protected", source=source
            )
        return InvalidFileFormatError(
            "Legacy binary .ppt files are not supported, save as .pptx",
            source=source,
        )
    return InvalidFileFormatError(
        "Invalid PowerPoint file format: missing ZIP signature", source=source
    )


def open_archive(
    buffer: bytes,
    *,
    limits: ZipBombLimits = DEFAULT_ZIP_BOMB_LIMITS,
    source: str | None = None,
) -> PptxArchive:
    """
    Open a byte buffer as a .pptx archive.

    Raises:
        InvalidFileFormatError: The buffer has no ZIP signature or the ZIP
            central directory is unreadable.
        ExtractionFileEncryptedError: The buffer is a password protected
            presentation.
        ExtractionZipBombError: The archive exceeds the ZIP-bomb limits.
    """
    if not validate(buffer):
        raise _reject(buffer, source)

    try:
        return PptxArchive(buffer, limits=limits, source=source)
    except zipfile.BadZipFile as e:
        raise InvalidFileFormatError(
            f"Failed to open PowerPoint file as ZIP archive: {e}",
            source=source,
            cause=e,
        ) from e


def _numbered_parts(archive: PptxArchive, pattern: re.Pattern) -> list[str]:
    numbered = []
    for name in archive.namelist:
        match = pattern.match(name)
        if match is None:
            continue
        numbered.append((int(match.group(1)), name))
    numbered.sort()
    return [name for _, name in numbered]


def list_slide_parts(archive: PptxArchive) -> list[tuple[int, str]]:
    """
    List slide parts as ``(slide_index, part_name)`` pairs.

    ``slide_index`` is 1-based and contiguous even when the part numbers have
    gaps (slide1.xml, slide3.xml -> 1, 2).
    """
    parts = _numbered_parts(archive, _SLIDE_PART_RE)
    logger.debug(f"Found {len(parts)} slide parts")
    return list(enumerate(parts, start=1))


def list_theme_parts(archive: PptxArchive) -> list[str]:
    """Theme parts ordered by the number in their name."""
    return _numbered_parts(archive, _THEME_PART_RE)
