#!/usr/bin/env python3
"""Apply the comments schema migrations.

    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f0a7d9b42
    python scripts/run_migrations.py base --downgrade

Runs before the API starts in the container; a failure stops the deploy.
"""

import argparse
import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config

from lostfound.config import Settings
from lostfound.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument(
        "--downgrade",
        action="store_true",
        help="Move down to the revision instead of up",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logfire(Settings())

    config = Config(str(ALEMBIC_INI))
    config.set_main_option("script_location", str(ALEMBIC_INI.parent / "migrations"))
    direction = "downgrade" if args.downgrade else "upgrade"

    with logfire.span(
        "migrations.{direction}", direction=direction, revision=args.revision
    ):
        try:
            if args.downgrade:
                command.downgrade(config, args.revision)
            else:
                command.upgrade(config, args.revision)
        except Exception as e:
            logfire.error(
                "Comments schema migration failed",
                direction=direction,
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=e,
            )
            raise

    logfire.info(
        "Comments schema migrated", direction=direction, revision=args.revision
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
