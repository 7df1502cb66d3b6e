#!/usr/bin/env python3
"""Upgrade the Harvest database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to a revision
    python scripts/run_migrations.py base       # drop every table
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from harvest.config import Settings
from harvest.util.logging import setup_logging
from harvest.util.observability import configure_logfire


def main(argv: list[str]) -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    alembic_cfg = Config("alembic.ini")

    with logfire.span("run_migrations", target=target, environment=settings.environment):
        try:
            if target == "base":
                command.downgrade(alembic_cfg, target)
            else:
                command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
