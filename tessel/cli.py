"""
Tessel Command Line
===================

Runs the map editor headless: key events come from a script, frames are
rasterized onto a terminal canvas, and the last frame is printed.

    tessel --script moves.keys --frames 2 --seed 7
"""

import argparse
import logging
from typing import List, Optional

from rich.console import Console

from tessel import __version__
from tessel.config import load_config
from tessel.engine import Engine, read_script
from tessel.errors import TesselError
from tessel.graphics.geometry import divceil
from tessel.graphics.terminal import TerminalCanvas
from tessel.log import configure_logging
from tessel.main import step

logger = logging.getLogger("tessel.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tessel", description="Reactive tile-map editor (headless runner)"
    )
    parser.add_argument("--config", help="TOML config file")
    parser.add_argument("--script", help="key script to feed, one 'key [action]' per line")
    parser.add_argument(
        "--frames", type=int, default=1, help="frames to step after the script (default: 1)"
    )
    parser.add_argument("--seed", type=int, help="seed for the initial map fill")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    console = console or Console()

    try:
        config = load_config(args.config, seed=args.seed)
        events = list(read_script(args.script)) if args.script else []
    except TesselError as exc:
        logger.error("%s", exc)
        return 1

    screen_w, screen_h = config.screen_size
    canvas = TerminalCanvas(
        divceil(screen_w, config.canvas_scale),
        divceil(screen_h, config.canvas_scale),
        scale=config.canvas_scale,
    )
    engine = Engine(config, canvas)

    try:
        step(engine, config.frame_delta)
        for event in events:
            if not engine.running:
                break
            engine.input.call(event)
            step(engine, config.frame_delta)
        for _ in range(max(args.frames, 0)):
            if not engine.running:
                break
            step(engine, config.frame_delta)
    except TesselError as exc:
        logger.error("%s", exc)
        return 1

    console.print(canvas)
    editor = engine.state_manager.current
    cursor = editor.scene.find_first("map_cursor").coord
    console.print(
        f"frames: {engine.frames}  cursor: {int(cursor.x)},{int(cursor.y)}  brush: {editor.brush}"
    )
    logger.info("ran %d frames from %d events", engine.frames, len(events))
    return 0
