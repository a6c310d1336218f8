#!/usr/bin/env python3
"""
Follow Tracker

A CLI tool for comparing an Instagram followers export with a following
export.

Usage:
    python -m follow_tracker.main summary <followers> <following>     Show counts
    python -m follow_tracker.main list <followers> <following>        List accounts in a category
    python -m follow_tracker.main detect <file> [<file> ...]          Show detected export types

Getting the files:
    Instagram -> Settings -> Download your information -> JSON format.
    The archive contains followers_1.json and following.json under
    connections/followers_and_following/. Files given in reverse order are
    swapped automatically.
"""

import argparse
import json
import sys

from follow_tracker.display import (
    CATEGORIES,
    CATEGORY_CHOICES,
    filter_accounts,
    format_summary,
    format_timestamp,
    get_category,
    truncate,
)
from follow_tracker.errors import AnalysisError
from follow_tracker.export_formats import describe_value, detect_type, parse_json, read_export_text
from follow_tracker.logging_config import setup_logging
from follow_tracker.pipeline import AnalysisOutcome, analyze_files

DEFAULT_LIST_LIMIT = 0


def run_analysis(args) -> AnalysisOutcome:
    """Analyze the two files named on the command line, exiting on failure."""
    try:
        outcome = analyze_files(args.first, args.second)
    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read file: {e}", file=sys.stderr)
        sys.exit(1)
    except AnalysisError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if outcome.swapped:
        print("Files were in reverse order. They have been automatically corrected.")
    return outcome


# ============== Commands ==============

def cmd_summary(args):
    """Show comparison statistics."""
    outcome = run_analysis(args)
    result = outcome.result

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    stats = result.stats
    print("\n" + "=" * 60)
    print("FOLLOWER ANALYSIS")
    print("=" * 60)

    print("\nSummary:")
    for line in format_summary(result):
        print(f"  {line}")

    print("\nCounts:")
    print(f"  Total followers:         {stats.total_followers:>10,}")
    print(f"  Total following:         {stats.total_following:>10,}")
    print(f"  Mutual:                  {stats.mutual_count:>10,}")
    print(f"  Not following back:      {stats.not_followers_back_count:>10,}")
    print(f"  You don't follow back:   {stats.not_following_back_count:>10,}")
    print("=" * 60)


def cmd_list(args):
    """List accounts in one category."""
    outcome = run_analysis(args)
    accounts = filter_accounts(get_category(outcome.result, args.category), args.search or "")
    _, title = CATEGORIES[args.category]

    print(title)
    header = f"{'IDX':<6} {'USERNAME':<32} {'FULL NAME':<24} {'SINCE'}"
    print("-" * len(header))
    print(header)
    print("-" * len(header))

    count = 0
    for idx, account in enumerate(accounts):
        print(f"{idx:<6} {truncate('@' + account.username, 30):<32} "
              f"{truncate(account.full_name or '-', 22):<24} "
              f"{format_timestamp(account.timestamp)}")

        count += 1
        if args.limit and count >= args.limit:
            print(f"\n... (limited to {args.limit} accounts)")
            break

    print("-" * len(header))
    print(f"Displayed {count} of {len(accounts)} accounts")


def cmd_detect(args):
    """Show the detected export type of each file."""
    failed = False
    for filename in args.files:
        try:
            data = parse_json(read_export_text(filename))
        except FileNotFoundError:
            print(f"{filename}: file not found")
            failed = True
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"{filename}: could not read file ({e})")
            failed = True
            continue

        if data is None:
            print(f"{filename}: not valid JSON")
            failed = True
            continue

        shape = detect_type(data)
        if shape is None:
            print(f"{filename}: unrecognized ({describe_value(data)})")
            failed = True
        else:
            print(f"{filename}: {shape.value}")

    if failed:
        sys.exit(1)


def add_pair_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('first', help='Followers export (followers_1.json)')
    parser.add_argument('second', help='Following export (following.json)')


def main():
    parser = argparse.ArgumentParser(
        description="Follow Tracker - Compare Instagram followers and following exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log output (-v info, -vv debug)')
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Summary command
    summary_parser = subparsers.add_parser('summary', help='Show follower statistics')
    add_pair_arguments(summary_parser)
    summary_parser.add_argument('--json', action='store_true', help='Print the full result as JSON')
    summary_parser.set_defaults(func=cmd_summary)

    # List command
    list_parser = subparsers.add_parser('list', help='List accounts in a category')
    add_pair_arguments(list_parser)
    list_parser.add_argument(
        '-c', '--category',
        choices=CATEGORY_CHOICES,
        default='not-following-back',
        help='Which accounts to list (default: not-following-back)'
    )
    list_parser.add_argument('-n', '--limit', type=int, default=DEFAULT_LIST_LIMIT,
                             help='Limit number of accounts')
    list_parser.add_argument('-s', '--search', help='Only show usernames containing this text')
    list_parser.set_defaults(func=cmd_list)

    # Detect command
    detect_parser = subparsers.add_parser('detect', help='Show the export type of files')
    detect_parser.add_argument('files', nargs='+', help='Export files to inspect')
    detect_parser.set_defaults(func=cmd_detect)

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logger = setup_logging(args.verbose)
    logger.debug("Running %s command", args.command)
    args.func(args)


if __name__ == "__main__":
    main()
