#!/usr/bin/env python3
"""
File Splitter - Main Entry Point

Splits large delimited text files into numbered chunks of at most N lines,
repeating the header rows in each chunk and optionally gzipping the results.

Usage:
    file-splitter -i INPUT -o OUTPUT_FOLDER -m MAX_LINES [options]

Example:
    file-splitter -i data/extract.csv -o out/ -m 100000 --compress
"""

import sys
import argparse
import logging
from typing import List, Optional

from dotenv import load_dotenv

from .pipeline.pipeline_runner import PipelineRunner
from .pipeline.pipeline_config import SplitConfig, ConfigurationError, LOG_LEVELS

PROG = "file-splitter"


def setup_logging(log_level: str = "INFO", quiet: bool = False, log_file: Optional[str] = None):
    """Setup logging configuration"""
    handlers = []
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    if not quiet:
        handlers.append(logging.StreamHandler(sys.stdout))

    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True
    )


def parse_bool(value: str) -> bool:
    """Parse a true/false command line value"""
    normalized = value.strip().lower()
    if normalized in ('true', 'yes', 'y', '1'):
        return True
    if normalized in ('false', 'no', 'n', '0'):
        return False
    raise argparse.ArgumentTypeError(f"expected true or false, got '{value}'")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description='Split large delimited text files into smaller numbered files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  file-splitter -i data/extract.csv -o out/ -m 100000
  file-splitter -i "data/*.csv" -o out/ -m 5000 -s -c
  file-splitter -i data/extract.tsv -o out/ -x 50 -d 2 -r false -b chunk

Output files are named <base>_000001<ext>, <base>_000002<ext>, ...
The output folder must already exist.
        """
    )

    parser.add_argument(
        '-i', '--inputfilepattern',
        help='the file(s) to split; a "*" in the filename matches several files (required)'
    )

    parser.add_argument(
        '-o', '--outputfolder',
        help='the output folder (required, must exist)'
    )

    parser.add_argument(
        '-d', '--headerrows',
        type=int,
        default=1,
        help='the number of header rows (default: 1)'
    )

    parser.add_argument(
        '-m', '--maxlinesperfile',
        type=int,
        help='the maximum number of data lines in each split file'
    )

    parser.add_argument(
        '-x', '--maxfilesizemb',
        type=int,
        help='the maximum size of each split file in MB'
    )

    parser.add_argument(
        '-r', '--repeatheaderrows',
        type=parse_bool,
        default=True,
        metavar='{true,false}',
        help='repeat header rows in each split file (default: true)'
    )

    parser.add_argument(
        '-c', '--compress',
        action='store_true',
        help='gzip compress split files after splitting'
    )

    parser.add_argument(
        '-b', '--outputfilenamebase',
        help='filename base for split files (ignored when the input is a wildcard pattern)'
    )

    parser.add_argument(
        '-w', '--overwrite',
        action='store_true',
        help='overwrite existing output files'
    )

    parser.add_argument(
        '-s', '--recursesubfolders',
        action='store_true',
        help='find matching files in all sub folders; inputs with the same name share output names'
    )

    parser.add_argument(
        '--report',
        help='write a CSV manifest of the split files to this path'
    )

    parser.add_argument(
        '--log-level',
        choices=LOG_LEVELS,
        type=str.upper,
        default=SplitConfig.default_log_level(),
        help='Set the logging level (default: INFO)'
    )

    parser.add_argument(
        '--log-file',
        default=SplitConfig.default_log_file(),
        help='also write the log to this file'
    )

    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Quiet mode - no banner, summary or progress bars'
    )

    return parser


def print_usage_error(message: str):
    print(f"{PROG}: {message}")
    print(f"Try `{PROG} --help' for more information.")


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    load_dotenv()
    args = build_parser().parse_args(argv)

    try:
        config = SplitConfig.from_args(args).validate()
    except ConfigurationError as e:
        print_usage_error(str(e))
        sys.exit(2)

    setup_logging(config.log_level, args.quiet, config.log_file)
    logger = logging.getLogger(__name__)

    try:
        runner = PipelineRunner(config, quiet_mode=args.quiet)
        success = runner.run_pipeline()

    except KeyboardInterrupt:
        logger.info("Split interrupted by user")
        print("\nSplit interrupted by user")
        sys.exit(1)

    sys.exit(0 if success else 1)


if __name__ == '__main__':
    main()
