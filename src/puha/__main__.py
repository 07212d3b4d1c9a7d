"""Entry point: python -m puha <command> (also installed as ``puha``)."""

from __future__ import annotations

import logging
import sys

from puha.cli import build_parser
from puha.config import load_config
from puha.errors import PuhaError
from puha.space.store import SpaceStore

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _fail(e: PuhaError) -> None:
    print(f"error: {e}", file=sys.stderr)
    sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    try:
        config = load_config()
    except PuhaError as e:
        _fail(e)

    if args.verbose >= 2:
        config.log_level = "DEBUG"
    elif args.verbose == 1:
        config.log_level = "INFO"
    _setup_logging(config.log_level)

    store = SpaceStore(args.file or config.file, indent=config.indent)
    try:
        args.handler(store, args)
    except PuhaError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        _fail(e)


if __name__ == "__main__":
    main()
