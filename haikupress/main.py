#!/usr/bin/env python3
"""
HaikuPress - haiku structure checker

Command line entry point: validates text files (or stdin) against the
5-7-5 haiku structure.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from config.config_manager import get_config_manager
from haikupress import __version__
from haikupress.evaluation.haiku_validator import HAIKU_PATTERN, split_lines, validate_haiku
from haikupress.evaluation.syllables import estimate_syllables
from haikupress.extraction.blocks import extract_plain_text
from haikupress.utils.logging_config import configure_logging

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2

logger = logging.getLogger(__name__)


def read_source(path: str) -> str:
    """Read a file, or stdin for "-"."""
    if path == "-":
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def line_report(text: str) -> List[Dict[str, Any]]:
    """Per-line syllable estimates, paired with the expected count where there is one."""
    report = []
    for index, line in enumerate(split_lines(text)):
        report.append({
            "text": line,
            "syllables": estimate_syllables(line),
            "expected": HAIKU_PATTERN[index] if index < len(HAIKU_PATTERN) else None
        })
    return report


def check_source(source: str, content: str, markup: bool = False,
                 show_syllables: bool = False) -> Dict[str, Any]:
    """Validate one input and build its result record."""
    text = extract_plain_text(content) if markup else content
    verdict = validate_haiku(text)

    result = {
        "source": source,
        "verdict": verdict.to_dict()
    }
    if show_syllables:
        result["lines"] = line_report(text)
    return result


def print_result(result: Dict[str, Any]):
    verdict = result["verdict"]
    if verdict["is_valid"]:
        print(f"✅ {result['source']}: valid haiku")
    else:
        print(f"❌ {result['source']}: {verdict['reason']['message']}")

    for line in result.get("lines", []):
        expected = line["expected"] if line["expected"] is not None else "-"
        print(f"   {line['syllables']:>2}/{expected}  {line['text']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="HaikuPress - check that text follows the 5-7-5 haiku structure",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a text file
  haikupress poem.txt

  # Check post content saved with block markup, showing per-line counts
  haikupress --markup --syllables post.html

  # Check stdin and print JSON
  echo "An old silent pond" | haikupress --json -
        """
    )

    parser.add_argument(
        "paths",
        nargs="*",
        default=["-"],
        help="Files to check; \"-\" reads stdin (default: stdin)"
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to configuration file (default: bundled default_config.yaml)"
    )

    parser.add_argument(
        "--markup",
        action="store_true",
        help="Treat input as block markup / HTML and extract plain text first"
    )

    parser.add_argument(
        "--syllables",
        action="store_true",
        help="Show the estimated syllable count of every line"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"HaikuPress {__version__}"
    )

    args = parser.parse_args(argv)

    config_manager = get_config_manager(args.config)
    log_config = config_manager.get_logging_config()
    try:
        configure_logging(level=log_config.level, fmt=log_config.format, log_file=log_config.file)
    except OSError as e:
        logger.error(f"Cannot open log file {log_config.file}: {e}")
        return EXIT_ERROR

    results = []
    exit_code = EXIT_VALID

    for path in args.paths:
        source = "<stdin>" if path == "-" else path
        try:
            content = read_source(path)
        except OSError as e:
            logger.error(f"Cannot read {source}: {e}")
            exit_code = EXIT_ERROR
            continue

        result = check_source(source, content, markup=args.markup, show_syllables=args.syllables)
        results.append(result)

        if not result["verdict"]["is_valid"] and exit_code == EXIT_VALID:
            exit_code = EXIT_INVALID

    if args.json:
        print(json.dumps(results, ensure_ascii=False, indent=2))
    else:
        for result in results:
            print_result(result)

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
