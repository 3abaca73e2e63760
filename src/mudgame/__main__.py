from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .dispatcher import CommandDispatcher
from .errors import MudError
from .logging_config import configure_logging, verbosity_to_level
from .settings import Settings
from .shell import GameShell
from .world import World, load_default_world, load_world

logger = logging.getLogger(__name__)

EXIT_CONFIG_ERROR = 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="mudgame",
        description="A small single-player text adventure played one command per line.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--world",
        dest="world_path",
        type=Path,
        default=None,
        help="Path to a YAML world definition (defaults to the bundled world).",
    )
    parser.add_argument(
        "--settings",
        dest="settings_path",
        type=Path,
        default=None,
        help="Path to a user settings YAML file to load/override defaults.",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    return parser.parse_args(argv)


def build_world(settings: Settings, override: Path | None = None) -> World:
    path = override or (Path(settings.world.path) if settings.world.path else None)
    if path is None:
        return load_default_world()
    return load_world(path)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(verbosity_to_level(args.verbose))

    try:
        settings = Settings.load(user_path=args.settings_path)
        world = build_world(settings, args.world_path)
    except MudError as exc:
        logger.debug("Startup failed", exc_info=True)
        print(f"mudgame: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    dispatcher = CommandDispatcher(world, world.new_player())
    return GameShell(dispatcher, settings.shell).run()


if __name__ == "__main__":
    sys.exit(main())
