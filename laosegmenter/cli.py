"""Command-line interface for Lao segmentation and grammar checking."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from .checker import LaoGrammarChecker
from .config import Config
from .pipeline import CheckPipeline

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="laosegmenter",
        description="Segment Lao text into words and check their grammar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check a single sentence
  laosegmenter check --text "ສະບາຍດີ ທ່ານ"

  # Only show word boundaries
  laosegmenter segment --text "ປະເທດລາວ"

  # Check a JSONL file using a config file
  laosegmenter check --config config.yaml

  # Direct arguments, keep only incorrect words
  laosegmenter check --input data/input.jsonl --output data/out --errors-only
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    check_parser = subparsers.add_parser("check", help="Check grammar of Lao text")
    setup_check_parser(check_parser)

    segment_parser = subparsers.add_parser("segment", help="Segment Lao text")
    setup_segment_parser(segment_parser)

    argv = list(sys.argv[1:] if argv is None else argv)
    # If no command specified, treat as check command
    if not argv or argv[0] not in ("check", "segment", "-h", "--help"):
        argv = ["check"] + argv

    return parser.parse_args(argv)


def setup_check_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for check command."""
    parser.add_argument(
        "--text",
        type=str,
        help="Text to check; prints JSON results instead of running the pipeline",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input JSONL or text file",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for CSV files",
    )
    parser.add_argument(
        "--format",
        choices=["jsonl", "txt"],
        help="Input format (default: jsonl)",
    )
    parser.add_argument(
        "--rule-set",
        choices=["basic", "extended"],
        help="Grammar rule table (default: extended)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--errors-only",
        action="store_true",
        help="Write only words judged incorrect",
    )
    parser.add_argument(
        "--no-spaces",
        action="store_true",
        help="Leave space words out of the output",
    )
    parser.add_argument(
        "--single-lines",
        action="store_true",
        help="Also write one CSV file per input record",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_segment_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for segment command."""
    parser.add_argument(
        "--text",
        type=str,
        required=True,
        help="Text to segment",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if args.config:
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if args.input:
        config.input_file = args.input
    if args.output:
        config.output.output_dir = args.output
    if args.format:
        config.input.format = args.format
    if args.rule_set:
        config.grammar.rule_set = args.rule_set
    if args.workers is not None:
        config.workers = args.workers
    if args.errors_only:
        config.output.errors_only = True
    if args.no_spaces:
        config.output.include_spaces = False
    if args.single_lines:
        config.output.save_single_lines = True

    # Re-validate after the overrides
    return Config.model_validate(config.model_dump())


def print_json(items: list) -> None:
    print(json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2))


def handle_segment(args: argparse.Namespace) -> int:
    """Handle segment command."""
    print_json(LaoGrammarChecker().segment(args.text))
    return 0


def handle_check(args: argparse.Namespace) -> int:
    """Handle check command."""
    try:
        config = build_config(args)
    except (ValueError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.text is not None:
        checker = LaoGrammarChecker(rule_set=config.grammar.rule_set)
        print_json(checker.check(args.text))
        return 0

    if not config.input_file:
        print("Error: Input file is required (use --input, --config or --text)", file=sys.stderr)
        return 1

    try:
        pipeline = CheckPipeline(config)
        record_count = pipeline.run()
        print(f"\nProcessed {record_count} records")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Grammar check failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "segment":
        return handle_segment(args)
    return handle_check(args)


if __name__ == "__main__":
    sys.exit(main())
