"""Seeding job entrypoint.

Adds a single contact to the phonebook database and exits. The job opens its
own connection from `DATABASE_URL`; it shares nothing with a running API
process.

Usage:

    phonebook-seed "Ada Lovelace" 040-1234556
    python -m jobs.seed.app.main "Ada Lovelace" 040-1234556

Exit codes: 0 on success, 1 on invalid input, configuration or database
failure, 2 on bad arguments.
"""

import argparse
import logging
import sys

from common.logging import configure_logging
from services.phonebook.app.db import build_store
from services.phonebook.app.errors import ConfigError, StorageError
from services.phonebook.app.models import ValidationFailed
from services.phonebook.app.settings import load_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phonebook-seed",
        description="Add one contact to the phonebook database.",
    )
    parser.add_argument("name", help="contact name (at least 3 characters)")
    parser.add_argument("number", help="phone number")
    return parser


def main(argv=None) -> int:
    """Run the job.

    Args:
        argv: Command-line arguments without the program name; defaults to
            `sys.argv[1:]`.

    Returns:
        int: The process exit code (0 = success).
    """
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as exc:
        configure_logging("phonebook-seed")
        logger.error("cannot seed: %s", exc)
        return 1
    configure_logging("phonebook-seed", settings.log_level)

    try:
        store = build_store(settings.database_url)
    except StorageError as exc:
        logger.error("cannot open database: %s", exc)
        return 1

    try:
        result = store.create(args.name, args.number)
    except StorageError as exc:
        logger.error("could not add contact: %s", exc)
        return 1
    finally:
        store.close()

    if isinstance(result, ValidationFailed):
        for field, reason in result.errors.items():
            print(f"invalid {field}: {reason}", file=sys.stderr)
        return 1

    print(f"added {result.name} number {result.number} to phonebook")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
