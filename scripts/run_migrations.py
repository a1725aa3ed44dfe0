#!/usr/bin/env python3
"""Migrate the votes schema with Logfire error tracking.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py <revision> # upgrade to revision
    python scripts/run_migrations.py -1         # step back one revision
"""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from voteledger.config import Settings
from voteledger.util.observability import configure_logfire

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def alembic_config() -> Config:
    """Alembic config that works from any working directory."""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    return config


def main(argv: list[str]) -> int:
    """Move the database to the requested revision."""
    settings = Settings()
    configure_logfire(settings)

    target = argv[1] if len(argv) > 1 else "head"
    database = make_url(settings.database_url).render_as_string(hide_password=True)

    with logfire.span("run_migrations", target=target, database=database):
        try:
            config = alembic_config()
            if target.startswith("-"):
                command.downgrade(config, target)
            else:
                command.upgrade(config, target)

            logfire.info("Votes schema migrated", target=target)
            return 0

        except Exception as e:
            logfire.error(
                "Votes schema migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # Re-raise so the container fails and doesn't start with broken schema
            raise


if __name__ == "__main__":
    sys.exit(main(sys.argv))
