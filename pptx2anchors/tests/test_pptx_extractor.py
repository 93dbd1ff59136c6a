import io
from unittest import TestCase

import pytest

from pptx2anchors.exceptions import InvalidFileFormatError
from pptx2anchors.extractors.data_types import PptSlide
from pptx2anchors.extractors.pptx_extractor import parse_pptx, read_pptx
from pptx2anchors.tests.fixtures import (
    background_xml,
    core_xml,
    make_pptx,
    slide_xml,
    text_shape,
    theme_xml,
)

tc = TestCase()


def _deck(count: int) -> bytes:
    slides = [
        slide_xml(
            text_shape(f"Topic {n}"),
            text_shape(f"Point {n}.1", f"Point {n}.2", x=100 * n, y=200 * n),
        )
        for n in range(1, count + 1)
    ]
    return make_pptx(slides, core=core_xml(keywords="a,b"), themes=[theme_xml()])


def test_slides_are_parsed_in_order() -> None:
    # slide parts beyond 9 sort numerically, not lexically
    document = parse_pptx(_deck(12))

    tc.assertEqual(12, document.total_slides)
    tc.assertEqual(list(range(1, 13)), [slide.slide_number for slide in document.slides])
    tc.assertEqual(
        [f"Topic {n}" for n in range(1, 13)], [slide.title for slide in document.slides]
    )
    tc.assertEqual(12, document.metadata.total_slides)
    tc.assertEqual(("a", "b"), document.metadata.keywords)
    tc.assertEqual("Office Theme", document.metadata.theme.name)


def test_slide_mapping_matches_slides() -> None:
    document = parse_pptx(_deck(3))

    tc.assertEqual({1: "slide-1", 2: "slide-2", 3: "slide-3"}, document.slide_mapping)
    for slide in document.slides:
        tc.assertEqual(document.slide_mapping[slide.slide_number], slide.slide_id)


def test_content_and_positions() -> None:
    slide = parse_pptx(_deck(2)).slides[1]

    tc.assertEqual(["Point 2.1", "Point 2.2"], [element.content for element in slide.content])
    tc.assertEqual(200, slide.content[0].position.x)
    tc.assertEqual(400, slide.content[0].position.y)


def test_parsing_is_idempotent() -> None:
    buffer = _deck(4)
    tc.assertEqual(parse_pptx(buffer), parse_pptx(buffer))


def test_thread_pool_gives_same_result() -> None:
    buffer = _deck(8)
    tc.assertEqual(parse_pptx(buffer), parse_pptx(buffer, max_workers=4))


def test_broken_slide_does_not_abort_parse() -> None:
    slides = [
        slide_xml(text_shape("First")),
        b"<p:sld><unclosed",
        slide_xml(
            text_shape("Third"),
            background=background_xml('<a:solidFill><a:srgbClr val="00FF00"/></a:solidFill>'),
        ),
    ]

    document = parse_pptx(make_pptx(slides, core=core_xml()))

    tc.assertEqual(3, document.total_slides)
    tc.assertEqual("First", document.slides[0].title)
    tc.assertEqual(PptSlide.fallback(2), document.slides[1])
    tc.assertEqual("Third", document.slides[2].title)
    tc.assertEqual("#00FF00", document.slides[2].background.color)


def test_slide_numbers_close_gaps_in_part_names() -> None:
    slides = [slide_xml(text_shape("A")), slide_xml(text_shape("B"))]

    document = parse_pptx(make_pptx(slides, slide_numbers=[1, 5]))

    tc.assertEqual([1, 2], [slide.slide_number for slide in document.slides])
    tc.assertEqual(["A", "B"], [slide.title for slide in document.slides])


def test_presentation_without_slides() -> None:
    document = parse_pptx(make_pptx([], core=core_xml()))

    tc.assertEqual(0, document.total_slides)
    tc.assertEqual({}, document.slide_mapping)
    tc.assertEqual("Introduction to Psychology", document.metadata.title)


def test_full_text() -> None:
    document = parse_pptx(_deck(2))

    tc.assertEqual(
        ["Topic 1\nPoint 1.1\nPoint 1.2", "Topic 2\nPoint 2.1\nPoint 2.2"],
        list(document.iterator()),
    )
    tc.assertEqual(
        "Topic 1\nPoint 1.1\nPoint 1.2\nTopic 2\nPoint 2.1\nPoint 2.2",
        document.get_full_text(),
    )


def test_invalid_input_raises() -> None:
    with pytest.raises(InvalidFileFormatError):
        parse_pptx(b"")
    with pytest.raises(InvalidFileFormatError):
        parse_pptx(b"%PDF-1.4 not a deck", source="deck.pdf")


def test_read_pptx_yields_one_document() -> None:
    file_like = io.BytesIO(_deck(2))
    file_like.seek(10)

    documents = list(read_pptx(file_like, path="lecture.pptx"))

    tc.assertEqual(1, len(documents))
    tc.assertEqual(2, documents[0].total_slides)
