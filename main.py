# main.py - Application Entry Point
"""
Main entry point for MoonRacer.
Sets up logging, loads the save data and starts the tkinter event loop.
"""

import argparse
import logging
import os
import tkinter as tk

from audio_manager import AudioManager
from config import HIGHSCORE_FILE, WINDOW_HEIGHT, WINDOW_WIDTH
from game import MoonRacerGame
from highscore import load_high_scores
from levels import LEVELS
from moonracer import MoonRacer


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="MoonRacer")
    parser.add_argument("--level", type=int, default=None,
                        help="start directly in this level (0-based)")
    parser.add_argument("--no-sound", action="store_true", help="disable all sounds")
    parser.add_argument("--save", default=HIGHSCORE_FILE, help="highscore file")
    parser.add_argument("--log-level", default=os.environ.get("MOONRACER_LOG", "INFO"),
                        help="logging level (default: INFO)")
    args = parser.parse_args(argv)
    if args.level is not None and not 0 <= args.level < len(LEVELS):
        parser.error(f"--level must be between 0 and {len(LEVELS) - 1}")
    return args


def main(argv: list[str] | None = None) -> None:
    """Create window, initialize game, and start event loop."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    racer = MoonRacer(LEVELS, load_high_scores(args.save))
    audio = AudioManager(enabled=not args.no_sound)

    root = tk.Tk()
    root.title("MoonRacer")
    root.geometry(f"{WINDOW_WIDTH}x{WINDOW_HEIGHT}")
    root.resizable(False, False)
    root.configure(bg="black")

    game = MoonRacerGame(root, racer, audio, save_path=args.save)
    if args.level is None:
        game.show_menu()
    else:
        game.start_level(args.level)

    def on_close():
        """Release audio resources before closing."""
        audio.shutdown()
        root.destroy()

    root.protocol("WM_DELETE_WINDOW", on_close)
    root.mainloop()


if __name__ == "__main__":
    main()
