"""
PPTX Extractor Package
======================

Each module covers one stage of the pipeline, leaves first:

    container:            ZIP signature check, archive access, part listing
    slide_extractor:      p:sld parsing into titles, content and notes
    style_extractor:      text style of a paragraph's first run
    background_extractor: slide background classification
    metadata_extractor:   docProps/core.xml and theme color scheme
    assembler:            invariant checks and PptDocument construction
    pptx_extractor:       the entry points wiring the stages together
    anchor_points:        slide lookup and anchor point candidates

Only ``container.open_archive`` raises for malformed input; every other
stage returns documented defaults and logs what it could not read.
"""
