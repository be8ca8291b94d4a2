# config.py
import os

# Base directories
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
AUDIO_DIR = os.path.join(BASE_DIR, "audio")
HIGHSCORE_FILE = os.environ.get("MOONRACER_SAVE", os.path.join(BASE_DIR, "highscores.txt"))

# Dimensions of the window (same aspect ratio as SCREEN_DIM)
WINDOW_WIDTH = 1062
WINDOW_HEIGHT = 600

# Fixed simulation rate
FREQ = 1.0 / 60.0

# Ship physics (units per tick)
THRUST_POWER = (0.01, 0.013)
DAMPING = 0.90
GRAVITY = (0.0, -0.01, 0.0)

SHIP_SIZE = 0.1
SHIP_RADIUS = SHIP_SIZE / 2.0
GOAL_SIZE = 0.1

# Levels are authored in a 80x60 space, top left is (0, 0)
LEVEL_SIZE = (80.0, 60.0)
# Size of the visible world, centered on (0, 0), y up
SCREEN_DIM = (8.85, 5.0)

# Where hidden objects are parked
OFFSCREEN = (50.0, 50.0)


def audio_path(name: str) -> str:
    """path to the audio/."""
    return os.path.join(AUDIO_DIR, name)


SOUND_FILES = {
    "thruster": "thruster.wav",  # Looped while thrusting
    "liftoff": "liftoff.wav",  # Leaving the pad
    "goal": "goal.wav",
    "completed": "completed.wav",
    "highscore": "highscore.wav",
}
