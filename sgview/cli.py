"""Command line entry: load a scene command file and print its structure."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Optional, Sequence

from sgview.importer import ScenegraphImporter
from sgview.logger import Logger
from sgview.text_renderer import render_text

DEFAULT_COMMAND_FILE = "scenegraphmodels/courtyard-scene-commands.txt"


@dataclass
class Options:
    """Settings taken from the command line."""

    debug: bool = False
    command_file: str = DEFAULT_COMMAND_FILE


def parse_options(argv: Sequence[str]) -> Options:
    """Read ``-d`` (debug output) and ``-f <path>`` (command file)."""
    args = list(argv)
    options = Options(debug="-d" in args)
    if "-f" in args:
        index = args.index("-f")
        if index + 1 < len(args):
            options.command_file = args[index + 1]
    return options


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Load the scene and print its node outline; returns the exit status."""
    options = parse_options(sys.argv[1:] if argv is None else argv)
    logger = Logger()
    if options.debug:
        logger.enable_debug()
    try:
        scenegraph = ScenegraphImporter().parse_file(options.command_file)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    logger.debug_print("Scenegraph made")
    print("\nScene Graph Structure:\n" + render_text(scenegraph.root))
    logger.debug_print("Finished printing the structure")
    return 0


if __name__ == "__main__":
    sys.exit(main())