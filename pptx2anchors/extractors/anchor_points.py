"""
Anchor point candidates.

An anchor point ties an instructor's quiz to a ``(bibliography, slide_number)``
pair. Persisting anchor points is the caller's job; this module only derives
the slide-side data from a parsed presentation.
"""

from pptx2anchors.exceptions import SlideNotFoundError
from pptx2anchors.extractors.data_types import AnchorPoint, PptDocument, PptSlide


def generate_anchor_point(slide: PptSlide) -> AnchorPoint:
    return AnchorPoint(
        slide_number=slide.slide_number,
        slide_id=slide.slide_id,
        title=slide.title,
        content=" ".join(element.content for element in slide.content),
        is_active=True,
    )


def get_all_anchor_points(document: PptDocument) -> list[AnchorPoint]:
    """One anchor point candidate per slide, in slide order."""
    return [generate_anchor_point(slide) for slide in document.slides]


def get_slide(document: PptDocument, slide_number: int) -> PptSlide:
    """
    Look up a slide by its 1-based number.

    Raises:
        SlideNotFoundError: No slide with that number exists.
    """
    if 1 <= slide_number <= len(document.slides):
        slide = document.slides[slide_number - 1]
        if slide.slide_number == slide_number:
            return slide
    raise SlideNotFoundError(slide_number, document.total_slides)
