#!/usr/bin/env python3
"""Upgrade the Quill database schema.

Usage:
    python scripts/run_migrations.py [revision]

The revision defaults to ``head``. Works from any working directory.
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from quill.config import Settings
from quill.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(argv: list[str]) -> int:
    """Run migrations up to the requested revision, logging failures to Logfire."""
    settings = Settings()
    configure_logfire(settings)

    revision = argv[1] if len(argv) > 1 else "head"
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    try:
        logfire.info(
            "Starting database migrations", revision=revision, database=database
        )

        command.upgrade(Config(str(ALEMBIC_INI)), revision)

        logfire.info("Database migrations completed", revision=revision)
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Re-raise so the deploy stops before the app starts on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
