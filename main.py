#!/usr/bin/env python3
"""
REZ Archive Tool - Entry Point

Lists and extracts the resources stored in legacy REZ archive files.
"""

import argparse
import json
import sys
from pathlib import Path

from tqdm.contrib.logging import logging_redirect_tqdm

from core.config import Config
from core.errors import RezError
from core.extraction import extract_entries
from core.filters import ResourceFilter
from core.listing import archive_to_dict, iter_listing_lines
from core.rez_file import open_archive
from utils.file_utils import format_size, format_timestamp, parse_size
from utils.i18n import translator as t
from utils.log_utils import configure_logging


def run_list_cli(args, config: Config):
    """Handles the 'list' command."""
    with open_archive(args.rez_file, config.get('max_directory_depth')) as (_, archive):
        if args.output == 'json':
            print(json.dumps(archive_to_dict(archive), indent=2, ensure_ascii=False))
            return
        for line in iter_listing_lines(archive.root_entries):
            print(line)


def run_info_cli(args, config: Config):
    """Handles the 'info' command."""
    with open_archive(args.rez_file, config.get('max_directory_depth')) as (_, archive):
        stats = archive.stats()
        rows = [
            (t.get('file_type'), archive.file_type),
            (t.get('user_title'), archive.user_title),
            (t.get('version'), archive.version),
            (t.get('archive_time'), f"{archive.time} ({format_timestamp(archive.time)})"),
            (t.get('resource_count'), stats.resources),
            (t.get('directory_count'), stats.directories),
            (t.get('total_size'), format_size(stats.total_size)),
        ]
        width = max(len(label) for label, _ in rows)
        for label, value in rows:
            print(f"{label:<{width}} {value}")


def run_extract_cli(args, config: Config):
    """Handles the 'extract' command."""
    chunk_size = config.get('chunk_size')
    if args.chunk_size:
        try:
            chunk_size = parse_size(args.chunk_size)
        except ValueError:
            raise argparse.ArgumentTypeError(t.get('invalid_chunk_size', args.chunk_size)) from None

    show_progress = config.get('show_progress') and not args.no_progress
    resource_filter = ResourceFilter(args.filters)

    with open_archive(args.rez_file, config.get('max_directory_depth')) as (rez_file, archive):
        with logging_redirect_tqdm():
            summary = extract_entries(
                rez_file,
                archive.root_entries,
                args.output_directory,
                resource_filter=resource_filter,
                chunk_size=chunk_size,
                show_progress=show_progress,
            )
    print(t.get('extract_summary', summary.extracted, format_size(summary.bytes_written), summary.skipped),
          file=sys.stderr)


COMMANDS = {
    'list': run_list_cli,
    'extract': run_extract_cli,
    'info': run_info_cli,
}


def build_parser(config: Config) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='rez-tool',
        description=t.get('app_description'),
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="""
Examples:
  rez-tool list sounds.rez
  rez-tool list sounds.rez --output json > sounds.json
  rez-tool extract sounds.rez ./out --filter "**.wav" --filter "textures\\*.dtx"
  rez-tool info sounds.rez
"""
    )
    parser.add_argument('--lang', choices=['en', 'de'], help=t.get('lang_help'))
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help=t.get('verbose_help'))
    verbosity.add_argument('-q', '--quiet', action='store_true', help=t.get('quiet_help'))

    subparsers = parser.add_subparsers(dest='command', required=True)

    list_parser = subparsers.add_parser('list', help=t.get('list_help'))
    list_parser.add_argument('rez_file', type=Path, help=t.get('rez_file_help'))
    list_parser.add_argument('--output', choices=['text', 'json'], default=config.get('default_output', 'text'),
                             help=t.get('output_help'))

    extract_parser = subparsers.add_parser('extract', help=t.get('extract_help'))
    extract_parser.add_argument('-f', '--filter', dest='filters', action='append', default=[],
                                help=t.get('filter_help'))
    extract_parser.add_argument('--chunk-size', type=str, help=t.get('chunk_size_help'))
    extract_parser.add_argument('--no-progress', action='store_true', help=t.get('no_progress_help'))
    extract_parser.add_argument('rez_file', type=Path, help=t.get('rez_file_help'))
    extract_parser.add_argument('output_directory', type=Path, help=t.get('output_dir_help'))

    info_parser = subparsers.add_parser('info', help=t.get('info_help'))
    info_parser.add_argument('rez_file', type=Path, help=t.get('rez_file_help'))

    return parser


def main(argv=None, config: Config = None) -> int:
    """Main entry point; returns the process exit status."""
    config = config or Config()
    t.set_language(config.get('language', 'en'))

    parser = build_parser(config)
    args = parser.parse_args(argv)

    if args.lang:
        t.set_language(args.lang)

    if args.verbose:
        log_level = 'DEBUG'
    elif args.quiet:
        log_level = 'ERROR'
    else:
        log_level = config.get('log_level', 'INFO')
    configure_logging(log_level)

    try:
        COMMANDS[args.command](args, config)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))
    except RezError as e:
        print(t.get('error_prefix', t.get('error_rez', args.rez_file, e)), file=sys.stderr)
        return 1
    except OSError as e:
        print(t.get('error_prefix', t.get('error_io', e)), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(f"\n{t.get('interrupted')}", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
