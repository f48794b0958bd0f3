"""Fixed screen texts.

Every screen is at most 79 columns by 25 rows and has no trailing
newline, so writing it from (0, 0) never scrolls the console.
"""
from gazool.config import DIFFICULTY_LEVELS
from gazool.fields.board import NUM_COLUMNS, NUM_ROWS, TILE_HEIGHT, TILE_WIDTH

SCREEN_WIDTH = 79
SCREEN_HEIGHT = 25

# Where the title screen shows the high score
TITLE_SCORE_POS = (1, 12)
# Where the board screen shows the current and top score
SCORE_POS = (3, 52)
TOP_SCORE_POS = (3, 64)
# Top-left corner of the victory/defeat banner
BANNER_POS = (10, 0)

LOGO = [
    " ____   ___  _  _    ___  ",
    "|___ \\ / _ \\| || |  ( _ ) ",
    "  __) | | | | || |_ / _ \\ ",
    " / __/| |_| |__   _| (_) |",
    "|_____|\\___/   |_|  \\___/ ",
]

LEVEL_NAMES = {
    8: "Amoeba",
    16: "Lichen",
    32: "Snail",
    64: "Goldfish",
    128: "Pigeon",
    256: "Raccoon",
    512: "Octopus",
    1024: "Crow",
    2048: "Human",
    4096: "Dolphin",
}


def _frame(lines: list[str]) -> str:
    """Box `lines` in asterisks, padding to the full screen size."""
    inner_width = SCREEN_WIDTH - 2
    inner_height = SCREEN_HEIGHT - 2
    body = [line[:inner_width].ljust(inner_width) for line in lines[:inner_height]]
    body += [" " * inner_width] * (inner_height - len(body))
    edge = "*" * SCREEN_WIDTH
    return "\n".join([edge] + ["*" + line + "*" for line in body] + [edge])


def _center(text: str) -> str:
    return text.center(SCREEN_WIDTH - 2).rstrip()


def _indent(text: str, column: int = 30) -> str:
    return " " * column + text


TITLE_SCREEN = _frame(
    ["High Score:", ""]
    + [_center(line) for line in LOGO]
    + [
        "",
        _center("The Return of Gazool"),
        _center("~*~*~*~*~*~*~*~*~*~*~"),
        "",
        _indent("(N)ew Game"),
        _indent("(I)nstructions"),
        _indent("(Q)uit"),
    ]
)

INSTRUCTION_SCREEN = _frame(
    [
        "",
        _indent("How to Play", 28),
        _indent("-----------", 28),
        _indent("W or Up:    shift tiles up", 28),
        _indent("A or Left:  shift tiles left", 28),
        _indent("S or Down:  shift tiles down", 28),
        _indent("D or Right: shift tiles right", 28),
        _indent("Q:          back to the title", 28),
        "",
        "",
        _indent("The Archdemon Gazool is hurtling toward Earth inside a", 8),
        _indent("comet of ice. Equal tiles that collide merge into one", 8),
        _indent("tile worth their sum. Build the tile your difficulty", 8),
        _indent("level asks for before the board fills up, and the comet", 8),
        _indent("melts harmlessly over the Pacific.", 8),
        "",
        "",
        _center("(To leave this screen, press 'Q')"),
    ]
)


def _level_lines() -> list[str]:
    ordered = sorted(DIFFICULTY_LEVELS.items(), key=lambda item: item[1])
    return [
        _indent(f"({key}) {tile:<4} -- {LEVEL_NAMES[tile]}", 27)
        for key, tile in ordered
    ]


DIFFICULTY_SCREEN = _frame(
    ["", "", "", "", _indent("Select A Difficulty Level", 22)] + _level_lines()
)


def _board_frame() -> str:
    border = ("#" + "-" * TILE_WIDTH) * NUM_COLUMNS + "#"
    cell = ("|" + " " * TILE_WIDTH) * NUM_COLUMNS + "|"
    lines = []
    for _ in range(NUM_ROWS):
        lines.append(border)
        lines.extend([cell] * TILE_HEIGHT)
    lines.append(border)

    panel_rule = "  #" + ("-" * TILE_WIDTH + "#") * 2
    panel = {
        0: panel_rule,
        1: "  |  SCORE" + " " * (TILE_WIDTH - 7) + "|  TOP" + " " * (TILE_WIDTH - 5) + "|",
        2: panel_rule,
        3: "  |" + (" " * TILE_WIDTH + "|") * 2,
        4: panel_rule,
        6: "     WASD or arrows: move",
        7: "     Q: quit",
    }
    return "\n".join(line + panel.get(i, "") for i, line in enumerate(lines))


GAME_BACKGROUND = _board_frame()

VICTORY_BANNER = "\n".join(
    [
        "*" * 68,
        "*" + "YOU WIN -- PRESS 'Q' TO RETURN TO THE MAIN SCREEN".center(66) + "*",
        "*" + "Gazool's comet melts. Way to go.".center(66) + "*",
        "*" * 68,
    ]
)

DEFEAT_BANNER = "\n".join(
    [
        "*" * 68,
        "*" + "YOU LOSE -- PRESS 'Q' TO RETURN TO THE MAIN SCREEN".center(66) + "*",
        "*" + "The board is full and nothing can merge.".center(66) + "*",
        "*" * 68,
    ]
)
