"""Run a command script against a fresh engine.

Usage::

    python -m toy_robot commands.txt --preset legacy --board
    printf "PLACE 0,0,NORTH\nMOVE\nREPORT\n" | python -m toy_robot
"""

import argparse
import sys
from dataclasses import replace
from typing import List, Optional, TextIO

from toy_robot.board import BoardView
from toy_robot.commands import run_script
from toy_robot.config import CONFIG_PRESETS, EngineConfig, get_config
from toy_robot.engine import MovementEngine
from toy_robot.logging_setup import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="toy_robot", description=__doc__.splitlines()[0])
    parser.add_argument("script", nargs="?", type=argparse.FileType("r"), default=sys.stdin)
    parser.add_argument("--preset", choices=sorted(CONFIG_PRESETS), default="default")
    parser.add_argument("--grid-size", type=int, default=None)
    parser.add_argument("--board", action="store_true", help="Print the final board")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )
    return parser


def main(argv: Optional[List[str]] = None, out: TextIO = sys.stdout) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    config: EngineConfig = get_config(args.preset)
    if args.grid_size is not None:
        config = replace(config, grid_size=args.grid_size)

    engine = MovementEngine(config)
    board = BoardView(engine)
    with args.script as script:
        for detail in run_script(engine, script):
            print(detail, file=out)
    if args.board:
        print(board.render(), file=out)
    board.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
