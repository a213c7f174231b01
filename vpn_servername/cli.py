"""
Server name record command line tool.

Usage:
    write-servername wg0.conf us_california-lax.pia.privateinternetaccess.com
    write-servername wg0.conf us_california-lax.pia.privateinternetaccess.com --format env
    write-servername wg0.conf --read
    write-servername wg0.conf --remove
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import AppConfig, WriterSettings, load_environment, setup_logging, validate_config
from .formatters import RecordFormat
from .services import ServerNameWriter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="write-servername",
        description=AppConfig.APP_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Write wg0.conf.servername
  write-servername wg0.conf us_california-lax.pia.privateinternetaccess.com

  # Overwrite wg0.conf with SERVER_NAME='...'
  write-servername wg0.conf us_california-lax.pia.privateinternetaccess.com --format env

  # Take the name from SERVER_NAME in a .env file
  write-servername wg0.conf --env-file vpn.env

  # Show the stored name
  write-servername wg0.conf --read
        """
    )

    parser.add_argument(
        "outfile",
        help="Tunnel configuration path the record belongs to"
    )

    parser.add_argument(
        "server_name",
        nargs="?",
        help="Server name to store (default: SERVER_NAME env var)"
    )

    parser.add_argument(
        "--format", "-f",
        choices=[f.value for f in RecordFormat],
        help="Record convention: sidecar (<outfile>.servername) or env (SERVER_NAME line in <outfile>). "
             "Can also be set via SERVERNAME_FORMAT env var."
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--read",
        action="store_true",
        help="Print the stored server name instead of writing"
    )
    action.add_argument(
        "--remove",
        action="store_true",
        help="Delete the stored record"
    )

    parser.add_argument(
        "--env-file", "-e",
        help="Path to .env file with settings"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"{AppConfig.APP_NAME} {AppConfig.APP_VERSION}"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Environment first so LOG_LEVEL/LOG_FILE from --env-file apply
    load_environment(args.env_file)
    setup_logging(verbose=args.verbose)

    # Override SERVERNAME_FORMAT if provided via command line
    if args.format:
        os.environ["SERVERNAME_FORMAT"] = args.format

    try:
        validate_config()
        settings = WriterSettings.from_env()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n❌ {e}", file=sys.stderr)
        return 1

    writer = ServerNameWriter(record_format=settings.record_format, file_mode=settings.file_mode)

    if args.read:
        try:
            print(writer.read(args.outfile))
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read server name: {e}")
            print(f"\n❌ Failed to read server name: {e}", file=sys.stderr)
            return 1
        return 0

    if args.remove:
        try:
            removed = writer.remove(args.outfile)
        except OSError as e:
            logger.error(f"Failed to remove server name record: {e}")
            print(f"\n❌ Failed to remove server name record: {e}", file=sys.stderr)
            return 1
        if not removed:
            print(f"No server name record for {args.outfile}")
        return 0

    server_name = args.server_name or os.getenv("SERVER_NAME")
    if not server_name:
        parser.error("server_name is required (or set SERVER_NAME)")

    try:
        path = writer.write(args.outfile, server_name)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to write server name: {e}")
        print(f"\n❌ Failed to write server name: {e}", file=sys.stderr)
        return 1

    print(f"Server name written to {path}")
    return 0


def run():
    """Console script entry point"""
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        print(f"\n❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)
