import typing
from abc import abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Literal, Mapping, Optional, Protocol, Tuple

ContentType = Literal["text", "image", "shape"]
Alignment = Literal["left", "center", "right", "justify"]
BackgroundType = Literal["solid", "gradient", "pattern", "image", "none"]
GradientDirection = Literal["horizontal", "vertical", "diagonal"]

DEFAULT_FONT_SIZE = "16pt"
DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_COLOR = "#000000"
DEFAULT_LAYOUT = "standard"

# The ten named slots of an OOXML color scheme
THEME_COLOR_ROLES = (
    "dk1",
    "lt1",
    "dk2",
    "lt2",
    "accent1",
    "accent2",
    "accent3",
    "accent4",
    "accent5",
    "accent6",
)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _frozen_mapping(value: Mapping) -> Mapping:
    return MappingProxyType(dict(value))


class ExtractionInterface(Protocol):
    @abstractmethod
    def iterator(self) -> typing.Iterator[str]:
        """
        Returns an iterator over the extracted text, one unit per slide.
        Speaker notes are not part of this iterator's return values.
        """
        ...

    @abstractmethod
    def get_full_text(self) -> str:
        """Full text of the slide deck as one single block of text"""
        ...

    @abstractmethod
    def get_metadata(self) -> "PptMetadata":
        """Returns the metadata of the extracted file"""
        ...


@dataclass(frozen=True)
class TextStyle:
    font_size: str = DEFAULT_FONT_SIZE
    font_family: str = DEFAULT_FONT_FAMILY
    color: str = DEFAULT_COLOR
    bold: bool = False
    italic: bool = False
    alignment: Alignment = "left"


@dataclass(frozen=True)
class ShapePosition:
    # offsets of the shape's top-left corner in EMU
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class SlideContentElement:
    type: ContentType = "text"
    content: str = ""
    style: TextStyle = field(default_factory=TextStyle)
    position: Optional[ShapePosition] = None


@dataclass(frozen=True)
class BackgroundStyle:
    """
    Fill of a slide background.

    Only the fields that belong to ``type`` are set, everything else stays
    ``None``. Pattern fills reuse ``gradient_colors`` for their
    ``[foreground, background]`` pair.
    """

    type: BackgroundType = "none"
    color: Optional[str] = None
    gradient_colors: Optional[Tuple[str, ...]] = None
    gradient_direction: Optional[GradientDirection] = None
    pattern_type: Optional[str] = None
    image_url: Optional[str] = None
    transparency: int = 0  # percent, 0 = opaque


@dataclass(frozen=True)
class ThemeInfo:
    name: str = "Default Theme"
    colors: Mapping[str, str] = field(default_factory=dict)
    has_custom_backgrounds: bool = False

    def __post_init__(self):
        object.__setattr__(self, "colors", _frozen_mapping(self.colors))


@dataclass(frozen=True)
class PptMetadata:
    title: str = "Untitled Presentation"
    author: str = "Unknown"
    created_date: datetime = field(default_factory=_utcnow)
    modified_date: datetime = field(default_factory=_utcnow)
    total_slides: int = 0
    subject: Optional[str] = None
    keywords: Tuple[str, ...] = ()
    theme: Optional[ThemeInfo] = None


@dataclass(frozen=True)
class PptSlide:
    slide_number: int = 0
    slide_id: str = ""
    title: str = ""
    content: Tuple[SlideContentElement, ...] = ()
    notes: str = ""
    layout: str = DEFAULT_LAYOUT
    background: BackgroundStyle = field(default_factory=BackgroundStyle)

    @classmethod
    def fallback(cls, slide_number: int) -> "PptSlide":
        """The minimal slide used when a slide part cannot be parsed."""
        return cls(
            slide_number=slide_number,
            slide_id=f"slide-{slide_number}",
            title=f"Slide {slide_number}",
        )

    def get_text(self) -> str:
        parts = [self.title] if self.title else []
        parts.extend(element.content for element in self.content)
        return "\n".join(parts)


@dataclass(frozen=True)
class AnchorPoint:
    slide_number: int = 0
    slide_id: str = ""
    title: str = ""
    content: str = ""
    is_active: bool = True


@dataclass(frozen=True)
class PptDocument(ExtractionInterface):
    total_slides: int = 0
    slides: Tuple[PptSlide, ...] = ()
    metadata: PptMetadata = field(default_factory=PptMetadata)
    # slide_number -> slide_id, in slide order
    slide_mapping: Mapping[int, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "slide_mapping", _frozen_mapping(self.slide_mapping))

    def iterator(self) -> typing.Iterator[str]:
        for slide in self.slides:
            yield slide.get_text().strip()

    def get_full_text(self) -> str:
        return "\n".join(self.iterator())

    def get_metadata(self) -> PptMetadata:
        return self.metadata

    def to_json(self) -> dict:
        from pptx2anchors.extractors.serialization import serialize_extraction

        return serialize_extraction(self)
