#!/usr/bin/env python3
"""Apply (or roll back) the Chute schema and catalog migrations."""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from chute.config import Settings
from chute.util.observability import configure_logfire


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Roll back to the revision instead of upgrading",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    settings = Settings()
    configure_logfire(settings)

    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", settings.database_url)
    direction = "downgrade" if args.downgrade else "upgrade"

    with logfire.span("migrations.{direction}", direction=direction, revision=args.revision):
        try:
            if args.downgrade:
                command.downgrade(alembic_cfg, args.revision)
            else:
                command.upgrade(alembic_cfg, args.revision)
        except Exception as e:
            logfire.error(
                "Migration failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The API container must not start against a half-migrated schema
            raise

    logfire.info("Migrations complete", direction=direction, revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
