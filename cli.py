#!/usr/bin/env python3
"""
Karaoke Song Indexer CLI

Builds a single JSON index from folders of karaoke song descriptions.

Usage:
    python cli.py <command> [options]

Commands:
    index --songs <dir>... --out-file <path> [--cover-dir <path>]
                             Index song libraries into a JSON file
    show <folder>            Print the index entry for one song folder
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent
sys.path.insert(0, str(PROJECT_ROOT))


def cmd_index(args):
    """Index song libraries."""
    from orchestrator import ConfigManager, SongIndexer

    config = ConfigManager(args.config)
    indexer = SongIndexer(config=config)

    library_roots = [root for group in (args.songs or []) for root in group]
    results = indexer.run(
        library_roots=library_roots or None,
        out_file=args.out_file,
        cover_dir=args.cover_dir
    )

    print(f"\n=== Index Results ===")
    print(f"Libraries scanned: {len(results['libraries'])}")
    print(f"Songs indexed: {results['songs']}")
    if results['cover_dir']:
        print(f"Covers exported: {results['covers']} -> {results['cover_dir']}")
    print(f"Index written to: {results['out_file']}")


def cmd_show(args):
    """Print the index entry for a single song folder."""
    from orchestrator import ConfigManager, SongIndexer

    config = ConfigManager(args.config)
    indexer = SongIndexer(config=config)

    song = indexer.parse_folder(args.folder)
    print(json.dumps(song.to_dict(), indent=2, ensure_ascii=False))


def build_parser():
    parser = argparse.ArgumentParser(
        prog='songindex',
        description='Karaoke Song Indexer CLI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('--config', default=None,
                        help='YAML configuration file (built-in defaults if omitted)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # index command
    index_parser = subparsers.add_parser('index', help='Index song libraries into a JSON file')
    index_parser.add_argument('--songs', nargs='+', action='append', metavar='DIR',
                              help='Song library folder(s), scanned in order')
    index_parser.add_argument('--out-file', help='Destination of the JSON index')
    index_parser.add_argument('--cover-dir', help='Export cover images to this folder')
    index_parser.set_defaults(func=cmd_index)

    # show command
    show_parser = subparsers.add_parser('show', help='Print the index entry for one song folder')
    show_parser.add_argument('folder', help='Song folder path')
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        args.func(args)
        return 0
    except KeyboardInterrupt:
        print("\nOperation cancelled.")
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
