"""End-to-end checks against decks written by python-pptx."""

import io
from datetime import datetime, timezone

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_ALIGN
from pptx.util import Inches, Pt

from pptx2anchors import get_all_anchor_points, parse_pptx

TITLE_AND_CONTENT = 1
BLANK = 6


def _build_deck() -> bytes:
    prs = Presentation()

    slide = prs.slides.add_slide(prs.slide_layouts[TITLE_AND_CONTENT])
    slide.shapes.title.text = "Memory"
    slide.placeholders[1].text_frame.text = "Encoding\nRetrieval"

    slide = prs.slides.add_slide(prs.slide_layouts[BLANK])
    text_frame = slide.shapes.add_textbox(
        Inches(1), Inches(2), Inches(6), Inches(1)
    ).text_frame
    text_frame.text = "Heading"
    paragraph = text_frame.add_paragraph()
    paragraph.alignment = PP_ALIGN.CENTER
    run = paragraph.add_run()
    run.text = "Key idea"
    run.font.bold = True
    run.font.italic = True
    run.font.size = Pt(24)
    run.font.name = "Calibri"
    run.font.color.rgb = RGBColor(0xFF, 0x00, 0x00)
    fill = slide.background.fill
    fill.solid()
    fill.fore_color.rgb = RGBColor(0x33, 0x66, 0x99)

    core = prs.core_properties
    core.title = "Introduction to Psychology"
    core.author = "Jane Doe"
    core.keywords = "memory, attention"
    core.created = datetime(2024, 1, 15, 9, 30)
    core.modified = datetime(2024, 2, 1, 17, 45)

    buffer = io.BytesIO()
    prs.save(buffer)
    return buffer.getvalue()


def test_python_pptx_deck() -> None:
    document = parse_pptx(_build_deck())

    assert document.total_slides == 2
    assert document.slide_mapping == {1: "slide-1", 2: "slide-2"}

    first, second = document.slides
    assert first.title == "Memory"
    assert [element.content for element in first.content] == ["Encoding", "Retrieval"]
    assert first.background.type == "none"

    assert second.title == "Heading"
    assert [element.content for element in second.content] == ["Key idea"]
    element = second.content[0]
    assert element.position.x == Inches(1)
    assert element.position.y == Inches(2)
    assert element.style.font_size == "2400pt"
    assert element.style.font_family == "Calibri"
    assert element.style.color == "#FF0000"
    assert element.style.bold
    assert element.style.italic
    assert element.style.alignment == "center"
    assert second.background.type == "solid"
    assert second.background.color == "#336699"


def test_python_pptx_metadata() -> None:
    metadata = parse_pptx(_build_deck()).metadata

    assert metadata.title == "Introduction to Psychology"
    assert metadata.author == "Jane Doe"
    assert metadata.keywords == ("memory", "attention")
    assert metadata.total_slides == 2
    assert metadata.created_date == datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc)
    assert metadata.modified_date == datetime(2024, 2, 1, 17, 45, tzinfo=timezone.utc)
    assert metadata.theme is not None
    assert "accent1" in metadata.theme.colors


def test_python_pptx_anchor_points() -> None:
    anchors = get_all_anchor_points(parse_pptx(_build_deck()))

    assert [(anchor.slide_number, anchor.title, anchor.content) for anchor in anchors] == [
        (1, "Memory", "Encoding Retrieval"),
        (2, "Heading", "Key idea"),
    ]
