#!/usr/bin/env python3

"""
Entry point script that converts IGC files to GeoJSON.
"""

import argparse
import logging
import sys

logger = logging.getLogger("igc_tracklog.main")


def parse_args(argv=None):
    """Parse command line arguments."""
    from igc_tracklog.config.constants import APP_DESCRIPTION

    parser = argparse.ArgumentParser(description=APP_DESCRIPTION)
    parser.add_argument(
        'inputs',
        nargs='+',
        help='IGC files or directories containing IGC files'
    )
    parser.add_argument(
        '-o', '--output-dir',
        help='Directory for the GeoJSON files (default: next to each input)'
    )
    parser.add_argument(
        '--altitude-offset',
        type=float,
        help='Meters added to every track altitude'
    )
    parser.add_argument(
        '--on-error',
        choices=['abort', 'skip'],
        help='What to do with malformed fix records (default: abort)'
    )
    parser.add_argument(
        '--metadata-only',
        action='store_true',
        help='Print the flight metadata instead of writing GeoJSON'
    )
    parser.add_argument(
        '--overwrite',
        action='store_true',
        help='Overwrite existing GeoJSON files'
    )
    parser.add_argument(
        '--config',
        help='Path to a JSON settings file'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    return parser.parse_args(argv)


def get_log_level(name):
    """Map a level name from the settings to a logging level, INFO if unknown."""
    level = getattr(logging, str(name).upper(), None)
    if not isinstance(level, int):
        logger.warning(f"Unknown log level {name!r}, using INFO")
        return logging.INFO
    return level


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    from igc_tracklog.config.settings import settings
    from igc_tracklog.ui.cli import CLI

    if args.config:
        settings.load_settings(args.config)

    level = logging.DEBUG if args.debug else get_log_level(settings.get('log_level'))
    package_logger = logging.getLogger("igc_tracklog")
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)

    cli = CLI(
        output_directory=args.output_dir,
        altitude_offset=args.altitude_offset,
        on_fix_error=args.on_error,
        metadata_only=args.metadata_only,
        overwrite=args.overwrite,
    )
    return cli.run(args.inputs)


if __name__ == '__main__':
    sys.exit(main())
