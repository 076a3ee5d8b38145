#!/usr/bin/env python3
"""
Tick Snake - Play Script

Controls:
    Arrow Keys or WASD: Move the snake
    R: Restart game
    ESC: Quit

Usage:
    python scripts/play.py
    python scripts/play.py --config my_config.yaml --freeze-on-collision
"""
import sys
import os
import argparse
import warnings
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Suppress pygame messages
os.environ['PYGAME_HIDE_SUPPORT_PROMPT'] = '1'
warnings.filterwarnings('ignore', category=UserWarning, module='pygame')

import pygame

from tick_snake.game import GameLoop, ControlSignal, TickScheduler, period_from_rate
from tick_snake.game.input import default_key_map
from tick_snake.game.renderer import StandaloneRenderer
from tick_snake.utils.config_loader import load_config


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Tick Snake - play Snake on a wrap-around grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/play.py
  python scripts/play.py --area-size 30 --rate 15
  python scripts/play.py --freeze-on-collision
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config file (default: config.yaml)"
    )
    parser.add_argument(
        "--area-size",
        type=int,
        default=None,
        help="Grid size in cells"
    )
    parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help="Ticks per second"
    )
    parser.add_argument(
        "--freeze-on-collision",
        action="store_true",
        help="Stop the snake when it bites itself"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for apple placement"
    )

    return parser.parse_args()


def main():
    """Main entry point for play mode."""
    args = parse_args()
    config = load_config(args.config)

    if args.area_size is not None:
        config.game.area_size = args.area_size
    if args.rate is not None:
        config.game.tick_rate_hz = args.rate
    if args.freeze_on_collision:
        config.game.freeze_on_collision = True
    if args.seed is not None:
        config.game.seed = args.seed

    loop = GameLoop(default_key_map(), config=config.game)
    scheduler = TickScheduler(period_from_rate(config.game.tick_rate_hz))

    renderer = StandaloneRenderer(
        area_size=config.game.area_size,
        window_size=(config.display.window_width, config.display.window_height),
        title=config.display.title
    )

    print(f"[Game] {config.game.area_size}x{config.game.area_size} grid at "
          f"{config.game.tick_rate_hz:g} ticks/s")

    clock = pygame.time.Clock()
    running = True
    high_score = 0

    try:
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False

                elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                    signal = loop.on_key_event(event.key, event.type == pygame.KEYDOWN)
                    if signal is ControlSignal.QUIT:
                        running = False
                    elif signal is ControlSignal.RESTART:
                        print("[Game] Restarted")

            if scheduler.due(pygame.time.get_ticks() * 1_000_000):
                snapshot = loop.tick()
                if snapshot.high_score > high_score:
                    high_score = snapshot.high_score
                    print(f"[Game] New high score: {high_score}")

            renderer.render_frame(loop.get_state())
            clock.tick(config.display.render_fps)
    finally:
        renderer.close()

    print(f"\nFinal High Score: {high_score}")


if __name__ == "__main__":
    main()
