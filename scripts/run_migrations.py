#!/usr/bin/env python3
"""Upgrade the Q&A schema to the latest revision.

Run before starting the API; the deploy fails if a migration fails.
"""

import sys

import logfire
from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory

from qna.config import Settings
from qna.util.observability import configure_logfire


def main(target: str = "head") -> int:
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    script = ScriptDirectory.from_config(alembic_cfg)

    with logfire.span("run_migrations", target=target, heads=script.get_heads()):
        try:
            command.upgrade(alembic_cfg, target)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                target=target,
                error=str(e),
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            raise

    logfire.info("Database migrations completed", target=target)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
