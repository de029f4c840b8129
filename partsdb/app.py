"""
Parts Inventory - Main Application
==================================
Entry point: setup logging, minta credentials, connect, jalankan menu.

Cara penggunaan:
    python run.py                        # Prompt login & password
    python run.py -u postgres            # Login dari argument, prompt password
    python run.py --log-file ./app.log   # Log file lain
"""

import argparse
import getpass
import sys

from partsdb.catalog import build_catalog
from partsdb.config import load_database_config, load_startup_config
from partsdb.database import DatabaseManager
from partsdb.errors import ConnectionFailure
from partsdb.logger import setup_logging
from partsdb.menu import PartsInventoryCLI


def read_credentials(user=None):
    """
    Minta login dan password dari operator.

    Returns:
        tuple: (user, password)
    """
    print("=== Connecting to database ===")
    if not user:
        user = input("Enter login: ").strip()
    password = getpass.getpass("Enter password: ")
    return user, password


def build_arg_parser():
    parser = argparse.ArgumentParser(
        description='Parts Inventory - browse and edit the electronics parts database',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
  DB_HOST, DB_PORT, DB_NAME, DB_SSLMODE   Database connection
  LOG_FILE                                Log file (default /logs/app.log)
  DB_STARTUP_DELAY                        Seconds to wait for PostgreSQL (default 5)
  DB_CONNECT_RETRIES, DB_RETRY_DELAY      Connection retries (default 3, 2s)
        """
    )
    parser.add_argument('-u', '--user', help='Database login (prompted if omitted)')
    parser.add_argument('--log-file', help='Override LOG_FILE')
    parser.add_argument('--startup-delay', type=float,
                        help='Override DB_STARTUP_DELAY (seconds)')
    parser.add_argument('--retries', type=int, help='Override DB_CONNECT_RETRIES')
    return parser


def main(argv=None):
    args = build_arg_parser().parse_args(argv)

    try:
        startup = load_startup_config()
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.log_file:
        startup['log_file'] = args.log_file
    if args.startup_delay is not None:
        startup['startup_delay'] = args.startup_delay
    if args.retries is not None:
        startup['retries'] = args.retries

    try:
        setup_logging(startup['log_file'])
    except OSError as e:
        print(f"Error opening log file: {e}")
        return 1

    try:
        user, password = read_credentials(args.user)
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
        return 1

    db = DatabaseManager(load_database_config(user, password))

    try:
        db.connect(
            retries=startup['retries'],
            retry_delay=startup['retry_delay'],
            startup_delay=startup['startup_delay'],
        )
    except ConnectionFailure:
        print("Error: could not connect to the database. Check credentials and database availability.")
        return 1

    print("✓ Database connection established")

    cli = PartsInventoryCLI(db, build_catalog())
    try:
        return cli.show_main_menu()
    finally:
        cli.disconnect()


if __name__ == "__main__":
    sys.exit(main())
