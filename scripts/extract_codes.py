"""CLI entrypoint: print the verification codes found in a message."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from otpextract.core.settings import ExtractorSettings
from otpextract.pipeline.extractor import CodeExtractor
from otpextract.utils.logging import get_logger, set_level


logger = get_logger("ExtractCLI")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Extract ranked one-time codes from message text.")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File holding the message body (default: stdin)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to extractor settings YAML")
    parser.add_argument("--limit", type=int, default=None, help="Maximum number of codes to print")
    parser.add_argument("--scores", action="store_true", help="Include confidence and offsets")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = ExtractorSettings.from_file(args.config) if args.config else ExtractorSettings()
    set_level("CodeExtractor", settings.log_level_number)
    limit = args.limit if args.limit is not None else settings.default_limit
    if limit < 1:
        parser.error("--limit must be at least 1")

    try:
        text = args.input.read()
    finally:
        if args.input is not sys.stdin:
            args.input.close()

    ranked = CodeExtractor(settings.rules).extract_scored(text)[:limit]
    if not ranked:
        logger.warning("No verification code found")
        return 1

    if args.scores:
        rows = [
            {**c.code.model_dump(mode="json"), "confidence": c.confidence, "start": c.start, "end": c.end}
            for c in ranked
        ]
    else:
        rows = [c.code.model_dump(mode="json") for c in ranked]
    json.dump(rows, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
