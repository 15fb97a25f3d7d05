# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Create the accounts and sessions tables if they do not exist yet."""

from __future__ import annotations

import argparse
import os
import sys


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create the StudySync auth schema")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL; defaults to DATABASE_URL from the environment or .env",
    )
    args = parser.parse_args(argv)
    if args.database_url:
        # Must be set before the engine module is imported.
        os.environ["DATABASE_URL"] = args.database_url

    from sqlalchemy.exc import SQLAlchemyError

    from studysync.infrastructure.db import init_db
    from studysync.shared.logging import logger, setup_logging

    setup_logging()
    try:
        init_db()
    except SQLAlchemyError as exc:
        logger.error(f"setup_db: failed ({type(exc).__name__}: {exc})")
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print("Database and accounts table created successfully.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
