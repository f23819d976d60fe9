"""Table tennis scoring constants.

Fixed ITTF game rules: first to 11, win by 2 once both players reach 10.
"""

# Game
POINTS_TO_WIN = 11
DEUCE_AT = 10  # both players at 10 or more = deuce
DEUCE_MARGIN = 2

# Serve rotation
SERVES_PER_TURN = 2  # every 2 points before deuce, every point at deuce

# Display names used when a player leaves the name field blank
DEFAULT_NAMES = {
    "left": "Left",
    "right": "Right",
}
