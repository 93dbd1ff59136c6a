from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

import pptx2anchors
from pptx2anchors.extractors.data_types import PptDocument
from pptx2anchors.extractors.serialization import serialize_extraction


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pptx2anchors",
        description="Parse a .pptx file and emit its slide text to stdout (or JSON).",
    )
    parser.add_argument(
        "path",
        type=Path,
        help="Path to the .pptx file to parse.",
    )
    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json",
        action="store_true",
        help="Emit the parsed document as structured JSON.",
    )
    output.add_argument(
        "--anchors",
        action="store_true",
        help="Emit one anchor point candidate per slide as a JSON list.",
    )
    output.add_argument(
        "--slide",
        type=int,
        metavar="N",
        help="Emit slide N (1-based) as JSON.",
    )
    return parser


def _json_payload(document: PptDocument, args: argparse.Namespace) -> dict | list | None:
    if args.json:
        return serialize_extraction(document)
    if args.anchors:
        return [
            serialize_extraction(anchor)
            for anchor in pptx2anchors.get_all_anchor_points(document)
        ]
    if args.slide is not None:
        return serialize_extraction(pptx2anchors.get_slide(document, args.slide))
    return None


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    try:
        args, unknown = parser.parse_known_args(argv)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code

    if unknown:
        unknown_str = " ".join(unknown)
        print(
            f"pptx2anchors: warning: unsupported arguments: {unknown_str}",
            file=sys.stderr,
        )
        return 1

    try:
        document = next(pptx2anchors.read_file(args.path))
        payload = _json_payload(document, args)
        if payload is None:
            print(document.get_full_text().rstrip())
        else:
            print(json.dumps(payload))
        return 0
    except Exception as exc:
        print(f"pptx2anchors: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
