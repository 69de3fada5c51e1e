"""Entry point: life <command> (or python -m lifecommit <command>)

- init:            Create the commit store
- commit:          Record a new commit interactively
- log:             List commits, newest first
- edit <id>:       Edit or remove the commit whose id contains <id>
- dir [folder]:    Export the static viewer (default folder: website)
"""

from __future__ import annotations

import asyncio
import logging
import sys

from lifecommit.config import load_config

COMMANDS = ("init", "commit", "log", "edit", "dir")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _usage() -> None:
    print("Usage: life <command> [args]")
    print("  init           Initialize your life")
    print("  commit         Commit a day of your life")
    print("  log            Show your commits, newest first")
    print("  edit <id>      Edit or remove a commit")
    print("  dir [folder]   Create a website to view your commits (default: website)")


def main(argv: list[str] | None = None) -> None:
    argv = sys.argv[1:] if argv is None else argv
    cmd = argv[0] if argv else None

    if cmd not in COMMANDS:
        _usage()
        sys.exit(1)

    config = load_config()
    _setup_logging(config.log_level)

    from lifecommit.core import LifeCommit

    app = LifeCommit(config)
    try:
        status = asyncio.run(app.run(cmd, argv[1:]))
    except KeyboardInterrupt:
        status = 130
    sys.exit(status)


if __name__ == "__main__":
    main()
