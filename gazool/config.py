"""Game tuning constants.

The command-line drivers expose flags for the timing values; everything
else is fixed for the ten preset difficulty levels.
"""

# Seconds between two state machine steps (one external tick)
TICK_SECONDS = 0.01

# Render/step the animation only when round_timer % ANIM_SLOW_DOWN == 0
ANIM_SLOW_DOWN = 1

# Max concurrent animated blocks (moving or idle)
MAX_ANIMATIONS = 16

# Display cells an animated block travels per step, per axis
ANI_STEP_SIZE = 1

# Difficulty key -> winning tile
DIFFICULTY_LEVELS = {
    "1": 8,
    "2": 16,
    "3": 32,
    "4": 64,
    "5": 128,
    "6": 256,
    "7": 512,
    "8": 1024,
    "9": 2048,
    "0": 4096,
}
