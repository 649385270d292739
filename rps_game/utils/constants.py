# Game constants
MOVES = ["rock", "paper", "scissors"]

# Game rules: each move maps to the moves it beats
MOVE_RULES = {
    "rock": ["scissors"],
    "paper": ["rock"],
    "scissors": ["paper"],
}

MOVE_NAMES = {
    "rock": "Rock",
    "paper": "Paper",
    "scissors": "Scissors",
}

MOVE_ICONS = {
    "rock": "mountain.2.fill",
    "paper": "document.fill",
    "scissors": "scissors",
}

# Outcome display
LABEL_WIN = "You Won"
LABEL_LOSS = "You Loss"
LABEL_TIE = "You Tied"

ICON_WIN = "flag.filled.and.flag.crossed"
ICON_LOSS = "flag.and.flag.filled.crossed"
ICON_TIE = "flag.2.crossed.fill"
ICON_DEFAULT = "questionmark.circle"
ICON_HOME = "gamecontroller"
ICON_GAME = "gamecontroller.fill"
ICON_PLAY_AGAIN = "house.fill"

# UI constants
WINDOW_NAME = "Rock, Paper, Scissors"
WINDOW_WIDTH = 480
WINDOW_HEIGHT = 800
FRAME_DELAY_MS = 30

TITLE_SCALE = 1.0
HEADING_SCALE = 1.2
TEXT_SCALE = 0.6
TEXT_THICKNESS = 2

BUTTON_HEIGHT = 56
BUTTON_PADDING = 16
ICON_SIZE = 27

# Colors (BGR)
COLOR_SUCCESS = (0, 200, 0)
COLOR_FAILURE = (40, 40, 220)
COLOR_WARNING = (0, 215, 255)
COLOR_TEXT = (20, 20, 20)
COLOR_BORDER = (255, 255, 255)
COLOR_PANEL = (200, 120, 140)

# Keys
KEY_ESC = 27
# waitKey reports Enter as 10 or 13 depending on the backend
ENTER_KEYS = (10, 13)
KEY_SPACE = 32
KEY_QUIT = ord("q")
MOVE_KEYS = {
    ord("r"): "rock",
    ord("p"): "paper",
    ord("s"): "scissors",
}
