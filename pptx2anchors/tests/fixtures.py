"""Builders for in-memory .pptx fixtures."""

import io
import zipfile
from xml.sax.saxutils import escape

NAMESPACES = (
    'xmlns:a="http://schemas.openxmlformats.org/drawingml/2006/main" '
    'xmlns:r="http://schemas.openxmlformats.org/officeDocument/2006/relationships" '
    'xmlns:p="http://schemas.openxmlformats.org/presentationml/2006/main"'
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'


def run_xml(
    text: str | None,
    *,
    sz: str | None = None,
    typeface: str | None = None,
    color: str | None = None,
    scheme_color: str | None = None,
    bold: bool = False,
    italic: bool = False,
    with_rpr: bool = True,
) -> str:
    t = f"<a:t>{escape(text)}</a:t>" if text is not None else ""
    if not with_rpr:
        return f"<a:r>{t}</a:r>"

    attrs = ' lang="en-US"'
    if sz is not None:
        attrs += f' sz="{sz}"'
    if bold:
        attrs += ' b="1"'
    if italic:
        attrs += ' i="1"'
    children = ""
    if color is not None:
        children += f'<a:solidFill><a:srgbClr val="{color}"/></a:solidFill>'
    elif scheme_color is not None:
        children += f'<a:solidFill><a:schemeClr val="{scheme_color}"/></a:solidFill>'
    if typeface is not None:
        children += f'<a:latin typeface="{typeface}"/>'
    return f"<a:r><a:rPr{attrs}>{children}</a:rPr>{t}</a:r>"


def paragraph_xml(*runs: str, algn: str | None = None, jc: str | None = None) -> str:
    p_pr = ""
    if algn is not None or jc is not None:
        algn_attr = f' algn="{algn}"' if algn is not None else ""
        jc_elem = f'<a:jc val="{jc}"/>' if jc is not None else ""
        p_pr = f"<a:pPr{algn_attr}>{jc_elem}</a:pPr>"
    return f"<a:p>{p_pr}{''.join(runs)}</a:p>"


def text_paragraph(text: str, **run_kwargs) -> str:
    return paragraph_xml(run_xml(text, **run_kwargs))


def shape_xml(*paragraphs: str, x: int | None = None, y: int | None = None) -> str:
    xfrm = ""
    if x is not None or y is not None:
        xfrm = (
            f'<a:xfrm><a:off x="{x or 0}" y="{y or 0}"/>'
            f'<a:ext cx="100" cy="100"/></a:xfrm>'
        )
    return (
        '<p:sp><p:nvSpPr><p:cNvPr id="2" name="Shape"/><p:cNvSpPr/><p:nvPr/></p:nvSpPr>'
        f"<p:spPr>{xfrm}</p:spPr>"
        f"<p:txBody><a:bodyPr/><a:lstStyle/>{''.join(paragraphs)}</p:txBody></p:sp>"
    )


def text_shape(*texts: str, x: int | None = None, y: int | None = None) -> str:
    return shape_xml(*(text_paragraph(text) for text in texts), x=x, y=y)


def background_xml(fill: str) -> str:
    return f"<p:bg><p:bgPr>{fill}<a:effectLst/></p:bgPr></p:bg>"


def slide_xml(*shapes: str, background: str = "", extra: str = "") -> bytes:
    return (
        f"{XML_DECLARATION}<p:sld {NAMESPACES}><p:cSld>{background}"
        '<p:spTree><p:nvGrpSpPr><p:cNvPr id="1" name=""/><p:cNvGrpSpPr/><p:nvPr/>'
        f"</p:nvGrpSpPr><p:grpSpPr/>{''.join(shapes)}</p:spTree></p:cSld>"
        f"{extra}</p:sld>"
    ).encode("utf-8")


def core_xml(
    *,
    title: str | None = "Introduction to Psychology",
    creator: str | None = "Jane Doe",
    subject: str | None = None,
    keywords: str | None = None,
    created: str | None = "2024-01-15T09:30:00Z",
    modified: str | None = "2024-02-01T17:45:00Z",
) -> bytes:
    fields = ""
    if title is not None:
        fields += f"<dc:title>{escape(title)}</dc:title>"
    if subject is not None:
        fields += f"<dc:subject>{escape(subject)}</dc:subject>"
    if creator is not None:
        fields += f"<dc:creator>{escape(creator)}</dc:creator>"
    if keywords is not None:
        fields += f"<cp:keywords>{escape(keywords)}</cp:keywords>"
    if created is not None:
        fields += f'<dcterms:created xsi:type="dcterms:W3CDTF">{created}</dcterms:created>'
    if modified is not None:
        fields += (
            f'<dcterms:modified xsi:type="dcterms:W3CDTF">{modified}</dcterms:modified>'
        )
    return (
        f"{XML_DECLARATION}<cp:coreProperties "
        'xmlns:cp="http://schemas.openxmlformats.org/package/2006/metadata/core-properties" '
        'xmlns:dc="http://purl.org/dc/elements/1.1/" '
        'xmlns:dcterms="http://purl.org/dc/terms/" '
        'xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">'
        f"{fields}</cp:coreProperties>"
    ).encode("utf-8")


def theme_xml(name: str = "Office Theme", colors: dict[str, str] | None = None) -> bytes:
    if colors is None:
        colors = {"dk1": "000000", "lt1": "FFFFFF", "accent1": "4472C4"}
    roles = "".join(
        f'<a:{role}><a:srgbClr val="{val}"/></a:{role}>' for role, val in colors.items()
    )
    return (
        f'{XML_DECLARATION}<a:theme {NAMESPACES} name="{name}"><a:themeElements>'
        f'<a:clrScheme name="Office">{roles}</a:clrScheme>'
        "</a:themeElements></a:theme>"
    ).encode("utf-8")


def make_pptx(
    slides: list[bytes],
    *,
    core: bytes | None = None,
    themes: list[bytes] | None = None,
    extra_files: dict[str, bytes] | None = None,
    slide_numbers: list[int] | None = None,
) -> bytes:
    """
    Build a minimal .pptx ZIP.

    ``slide_numbers`` overrides the N in ``ppt/slides/slideN.xml``; slides are
    written in reverse order so ZIP directory order never matches slide order.
    """
    if slide_numbers is None:
        slide_numbers = list(range(1, len(slides) + 1))
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        zf.writestr("[Content_Types].xml", f"{XML_DECLARATION}<Types/>")
        for number, data in reversed(list(zip(slide_numbers, slides))):
            zf.writestr(f"ppt/slides/slide{number}.xml", data)
            zf.writestr(f"ppt/slides/_rels/slide{number}.xml.rels", "<Relationships/>")
        if core is not None:
            zf.writestr("docProps/core.xml", core)
        for index, theme in enumerate(themes or [], start=1):
            zf.writestr(f"ppt/theme/theme{index}.xml", theme)
        for name, data in (extra_files or {}).items():
            zf.writestr(name, data)
    return buffer.getvalue()
