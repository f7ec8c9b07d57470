#!/usr/bin/env python3
"""
Example: Parse a creator message into a draft deal.

This script demonstrates:
1. Parsing a message against an optional brand roster
2. Printing the ExtractedDeal as JSON
3. Running the bundled sample messages when no message is given

Usage:
    python examples/parse_message.py 'Nike wants 2 reels for $1500' --brand Nike
    echo "Hey, this is Priya from GlowCo" | python examples/parse_message.py -
    python examples/parse_message.py --json-logs --log-level DEBUG
"""

import argparse
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from deal_parser import DealParser, InvalidInputError
from deal_parser.logging import configure_logging, logging_context


SAMPLE_ROSTER = ['Nike', 'Adidas', 'Apple']

SAMPLE_MESSAGES = [
    "Nike wants 2 reels for $1500",
    "Adidas collab - 3 posts, they'll pay $2000, let's negotiate pricing",
    "Apple wants a YouTube video, payment TBD",
    "Budget is ₹5000 but could go up to $200",
    "2 reels and 1 more reel on Instagram",
    "Hey Sarah, this is Priya from GlowCo, we want a TikTok video",
    "Deal is confirmed and locked, posting by Friday",
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description='Parse a creator message into a draft deal.')
    parser.add_argument(
        'message',
        nargs='?',
        help="Message text, or '-' to read from stdin. Omit to run the samples.",
    )
    parser.add_argument(
        '--brand',
        action='append',
        default=None,
        help='Known brand name (repeatable). Defaults to a sample roster when running samples.',
    )
    parser.add_argument('--json-logs', action='store_true', help='Emit JSON log lines')
    parser.add_argument('--log-level', default=None, help='Log level (default: config)')
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(json_output=args.json_logs, log_level=args.log_level)

    if args.message is None:
        messages = SAMPLE_MESSAGES
        roster = args.brand if args.brand is not None else SAMPLE_ROSTER
    elif args.message == '-':
        messages = [sys.stdin.read()]
        roster = args.brand or []
    else:
        messages = [args.message]
        roster = args.brand or []

    try:
        parser = DealParser(known_brands=roster)
        for index, message in enumerate(messages, start=1):
            with logging_context(trace_id=f"cli-{index}"):
                deal = parser.parse(message)
            print(f"> {message.strip()}")
            print(deal.model_dump_json(indent=2))
            print()
    except InvalidInputError as exc:
        print(f"Invalid input: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
