#!/usr/bin/env python3
"""
Command-line script to extract Dublin Core metadata from HTML files.

Usage:
    python run_dublincore.py page.html
    python run_dublincore.py page1.html page2.html -o dublincore.json
    python run_dublincore.py page.html --format html
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from html_dublincore.main import DublinCore
from html_dublincore.exceptions import DublinCoreError
from html_dublincore.logger import setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract Dublin Core <meta> tags from HTML files"
    )
    parser.add_argument("files", nargs="+", help="HTML files to process")
    parser.add_argument(
        "--format", "-f",
        choices=["json", "html"],
        default="json",
        help="Output as JSON records (default) or as <meta> tags"
    )
    parser.add_argument("--output", "-o", help="Output file (default: print to stdout)")
    parser.add_argument(
        "--parser", "-p",
        choices=["html5lib", "lxml", "html.parser"],
        help="Force a BeautifulSoup backend"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Keep stdout clean for the output unless asked for detail
    setup_logger(level=logging.DEBUG if args.verbose else logging.ERROR)

    results = []
    chunks = []
    failures = 0

    for filepath in args.files:
        path = Path(filepath)
        try:
            dc = DublinCore.from_file(path, features=args.parser)
        except (OSError, DublinCoreError) as e:
            failures += 1
            print(f"✗ {path.name}: {e}", file=sys.stderr)
            results.append({"file": path.name, "status": "error", "error": str(e)})
            continue

        for message in dc.errors:
            print(f"! {path.name}: {message}", file=sys.stderr)

        if args.format == "html":
            chunks.append(f"<!-- {path.name} -->\n{dc.to_html()}")
        else:
            record = dc.to_record().to_json_dict()
            results.append({"file": path.name, "status": "success", **record})

    if args.format == "html":
        output = "".join(chunks)
    else:
        # ensure_ascii=False keeps non-ASCII metadata readable
        output = json.dumps(results, indent=2, ensure_ascii=False)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"Saved to: {args.output}", file=sys.stderr)
    else:
        print(output)

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
