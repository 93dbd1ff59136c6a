from typing import Mapping, Sequence

from pptx2anchors.exceptions import DocumentAssemblyError
from pptx2anchors.extractors.data_types import PptDocument, PptMetadata, PptSlide


def assemble(
    slides: Sequence[PptSlide],
    metadata: PptMetadata,
    slide_mapping: Mapping[int, str],
) -> PptDocument:
    """
    Combine parsed slides and metadata into one PptDocument.

    Raises:
        DocumentAssemblyError: Slide numbers are not 1..N in order, the
            mapping does not match the slides one to one, or the metadata
            reports a different slide count.
    """
    numbers = [slide.slide_number for slide in slides]
    expected = list(range(1, len(slides) + 1))
    if numbers != expected:
        raise DocumentAssemblyError(
            f"Slide numbers must run 1..{len(slides)} without gaps, got {numbers}"
        )

    if len(slide_mapping) != len(slides):
        raise DocumentAssemblyError(
            f"Slide mapping has {len(slide_mapping)} entries for {len(slides)} slides"
        )
    for slide in slides:
        if slide_mapping.get(slide.slide_number) != slide.slide_id:
            raise DocumentAssemblyError(
                f"Slide mapping disagrees with slide {slide.slide_number}: "
                f"{slide_mapping.get(slide.slide_number)!r} != {slide.slide_id!r}"
            )

    if metadata.total_slides != len(slides):
        raise DocumentAssemblyError(
            f"Metadata reports {metadata.total_slides} slides, parsed {len(slides)}"
        )

    return PptDocument(
        total_slides=len(slides),
        slides=tuple(slides),
        metadata=metadata,
        slide_mapping={number: slide_mapping[number] for number in expected},
    )
