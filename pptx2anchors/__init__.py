"""
pptx2anchors: PowerPoint parsing for slide-anchored quizzes.

Extracts a typed representation of a .pptx presentation (slide titles, styled
text, shape positions, speaker notes, backgrounds, metadata and theme colors)
so that instructors can attach anchor points to individual slides.
"""

import io
from pathlib import Path
from typing import Any, Generator

from pptx2anchors.exceptions import (
    DocumentAssemblyError,
    ExtractionError,
    ExtractionFileEncryptedError,
    ExtractionZipBombError,
    InvalidFileFormatError,
    SlideNotFoundError,
)
from pptx2anchors.extractors.anchor_points import (
    generate_anchor_point,
    get_all_anchor_points,
    get_slide,
)
from pptx2anchors.extractors.container import validate
from pptx2anchors.extractors.data_types import (
    AnchorPoint,
    BackgroundStyle,
    PptDocument,
    PptMetadata,
    PptSlide,
    ShapePosition,
    SlideContentElement,
    TextStyle,
    ThemeInfo,
)
from pptx2anchors.extractors.pptx_extractor import parse_pptx, read_pptx

__version__ = "0.1.0"


def read_file(
    path: str | Path,
) -> Generator[PptDocument, Any, None]:
    """
    Read and extract a presentation from disk.

    Args:
        path: Path to the .pptx file to read.

    Yields:
        The parsed PptDocument.

    Raises:
        InvalidFileFormatError: If the file is not a readable .pptx container.
        FileNotFoundError: If the file does not exist.

    Example:
        >>> import pptx2anchors
        >>> for document in pptx2anchors.read_file("lecture.pptx"):
        ...     print(document.get_full_text())
    """
    path = Path(path)
    with open(path, "rb") as f:
        yield from read_pptx(io.BytesIO(f.read()), str(path))


__all__ = [
    # Version
    "__version__",
    # Main functions
    "read_file",
    "read_pptx",
    "parse_pptx",
    "validate",
    # Anchor points
    "generate_anchor_point",
    "get_all_anchor_points",
    "get_slide",
    # Data types
    "AnchorPoint",
    "BackgroundStyle",
    "PptDocument",
    "PptMetadata",
    "PptSlide",
    "ShapePosition",
    "SlideContentElement",
    "TextStyle",
    "ThemeInfo",
    # Exceptions
    "DocumentAssemblyError",
    "ExtractionError",
    "ExtractionFileEncryptedError",
    "ExtractionZipBombError",
    "InvalidFileFormatError",
    "SlideNotFoundError",
]
