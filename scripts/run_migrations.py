#!/usr/bin/env python3
"""Apply Folio schema migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py              # upgrade to head
    python scripts/run_migrations.py 3c1f7a9e2b40 # upgrade to a revision
    python scripts/run_migrations.py --downgrade base
"""

import argparse
import sys
from urllib.parse import urlparse

import logfire
from alembic import command
from alembic.config import Config

from folio.config import Settings
from folio.util.observability import configure_logfire


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run Folio database migrations")
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Downgrade to the revision instead of upgrading",
    )
    parser.add_argument("--config", default="alembic.ini", help="Alembic config file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    settings = Settings()
    configure_logfire(settings)

    direction = "downgrade" if args.downgrade else "upgrade"
    database_host = urlparse(settings.database_url).hostname

    with logfire.span(
        "migrations.run",
        direction=direction,
        revision=args.revision,
        database_host=database_host,
    ):
        try:
            alembic_cfg = Config(args.config)
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                direction=direction,
                revision=args.revision,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

        logfire.info("Database migrations completed", direction=direction, revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
