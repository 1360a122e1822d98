# main.py
from __future__ import annotations
import argparse
import logging
import random
import sys
from functools import partial
from pathlib import Path

import arcade
from settings import WIDTH, HEIGHT, BG, TITLE, SimulationConfig
from errors import TuningError
from high_score_store import JsonHighScoreStore
from menu_view import MenuView
from simulation import SimulationCore
from tuning_loader import load_tuning

logger = logging.getLogger(__name__)

DEFAULT_SCORES_PATH = Path.home() / ".jumper_best.json"


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="jumper", description="Endless runner: jump the obstacles.")
    parser.add_argument("--tuning", type=Path, default=None,
                        help="JSON file overriding simulation constants")
    parser.add_argument("--scores", type=Path, default=DEFAULT_SCORES_PATH,
                        help="file holding the best score (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for obstacle randomness")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        config = load_tuning(args.tuning) if args.tuning else SimulationConfig().validate()
    except TuningError as e:
        logger.error("%s", e)
        return 2

    store = JsonHighScoreStore(args.scores)
    core_factory = partial(SimulationCore, config, random.Random(args.seed), store)

    window = arcade.Window(WIDTH, HEIGHT, TITLE, resizable=False)
    arcade.set_background_color(BG)
    window.show_view(MenuView(core_factory))
    arcade.run()
    return 0

if __name__ == "__main__":
    sys.exit(main())
