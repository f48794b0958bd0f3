from gazool.screens.draw import (
    draw_animation_frame,
    draw_background,
    draw_banner,
    draw_block,
    draw_blocks,
    draw_board,
    draw_score,
    draw_title,
)

__all__ = [
    "draw_animation_frame",
    "draw_background",
    "draw_banner",
    "draw_block",
    "draw_blocks",
    "draw_board",
    "draw_score",
    "draw_title",
]
