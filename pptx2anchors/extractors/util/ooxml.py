"""Namespace-qualified tag names shared by the PPTX extractors."""

from xml.etree import ElementTree as ET

# XML Namespaces used in PPTX documents
P_NS = "{http://schemas.openxmlformats.org/presentationml/2006/main}"
A_NS = "{http://schemas.openxmlformats.org/drawingml/2006/main}"
R_NS = "{http://schemas.openxmlformats.org/officeDocument/2006/relationships}"
CP_NS = "{http://schemas.openxmlformats.org/package/2006/metadata/core-properties}"
DC_NS = "{http://purl.org/dc/elements/1.1/}"
DCTERMS_NS = "{http://purl.org/dc/terms/}"

# PresentationML
P_SLD = f"{P_NS}sld"
P_SLDID = f"{P_NS}sldId"
P_CSLD = f"{P_NS}cSld"
P_SPTREE = f"{P_NS}spTree"
P_SP = f"{P_NS}sp"
P_SPPR = f"{P_NS}spPr"
P_TXBODY = f"{P_NS}txBody"
P_BG = f"{P_NS}bg"
P_BGPR = f"{P_NS}bgPr"

# DrawingML text
A_P = f"{A_NS}p"
A_R = f"{A_NS}r"
A_T = f"{A_NS}t"
A_PPR = f"{A_NS}pPr"
A_RPR = f"{A_NS}rPr"
A_JC = f"{A_NS}jc"
A_LATIN = f"{A_NS}latin"
A_XFRM = f"{A_NS}xfrm"
A_OFF = f"{A_NS}off"

# DrawingML fills
A_SOLIDFILL = f"{A_NS}solidFill"
A_GRADFILL = f"{A_NS}gradFill"
A_PATTFILL = f"{A_NS}pattFill"
A_BLIPFILL = f"{A_NS}blipFill"
A_NOFILL = f"{A_NS}noFill"
A_SRGBCLR = f"{A_NS}srgbClr"
A_SYSCLR = f"{A_NS}sysClr"
A_GSLST = f"{A_NS}gsLst"
A_GS = f"{A_NS}gs"
A_LIN = f"{A_NS}lin"
A_FGCLR = f"{A_NS}fgClr"
A_BGCLR = f"{A_NS}bgClr"
A_BLIP = f"{A_NS}blip"
A_ALPHA = f"{A_NS}alpha"

# DrawingML theme
A_THEME = f"{A_NS}theme"
A_CLRSCHEME = f"{A_NS}clrScheme"

R_ID = f"{R_NS}id"
R_EMBED = f"{R_NS}embed"
R_LINK = f"{R_NS}link"

DC_TITLE = f"{DC_NS}title"
DC_CREATOR = f"{DC_NS}creator"
DC_SUBJECT = f"{DC_NS}subject"
CP_KEYWORDS = f"{CP_NS}keywords"
DCTERMS_CREATED = f"{DCTERMS_NS}created"
DCTERMS_MODIFIED = f"{DCTERMS_NS}modified"


def get_element_text(root: ET.Element | None, tag: str) -> str | None:
    """Extract text from a child element if it exists and has text content."""
    if root is None:
        return None
    elem = root.find(tag)
    if elem is not None and elem.text:
        return elem.text
    return None
