"""
Layout constants for Duck Game podium screenshots.

All coordinates are (x, y) top-left pixel offsets into the full podium image,
sizes are (width, height). The podium screen is rendered at a single fixed
resolution, so these only change if the game's UI layout changes.
"""

# Native podium screenshot resolution (width, height)
PODIUM_SIZE = (320, 180)

# Score placards under each podium slot
PLACARD_SIZE = (21, 8)

FOUR_PLAYER_PLACARD_POSITIONS = [
    (85, 149),
    (127, 149),
    (169, 149),
    (211, 149),
]

THREE_PLAYER_PLACARD_POSITIONS = [
    (106, 149),
    (148, 149),
    (190, 149),
]

# A 2-player podium only uses the two middle slots of the 4-player grid
TWO_PLAYER_PLACARD_INDICES = (1, 2)

# "Player X Wins" banner
VICTOR_BANNER_POSITION = (72, 35)
VICTOR_BANNER_SIZE = (179, 23)

# Colors (RGB)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

# Album screenshots are saved as e.g. "12-15-16 18;03.png"
ALBUM_TIMESTAMP_FORMAT = "%m-%d-%y %H;%M"
ALBUM_EXTENSION = ".png"

# Layout override file the command line picks up from the working directory
DEFAULT_LAYOUT_FILE = "podium_layout.json"
