from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Set, Tuple

from merge2048.components.board import BoardSnapshot
from merge2048.constants import (
    BACKGROUND_COLOR,
    DARK_TEXT_COLOR,
    EMPTY_TILE_COLOR,
    LIGHT_TEXT_COLOR,
    MERGE_HIGHLIGHT_COLOR,
    SPAWN_HIGHLIGHT_COLOR,
    TILE_COLORS,
)

if TYPE_CHECKING:
    from merge2048.systems.render import RenderSystem

BoardPos = Tuple[int, int]


def tile_color(value: int) -> Tuple[int, int, int]:
    if value == 0:
        return EMPTY_TILE_COLOR
    if value in TILE_COLORS:
        return TILE_COLORS[value]
    return TILE_COLORS[max(TILE_COLORS)]


def text_color(value: int) -> Tuple[int, int, int]:
    # Small values sit on pale tiles and need dark text.
    return DARK_TEXT_COLOR if value <= 4 else LIGHT_TEXT_COLOR


def font_size_for(value: int, tile_size: int) -> int:
    digits = len(str(value))
    scale = 0.45 if digits <= 2 else 0.35 if digits == 3 else 0.28
    return max(8, int(tile_size * scale))


class BoardRenderer:
    def __init__(self, render_system: RenderSystem, padding: int = 4):
        self._rs = render_system
        self._padding = padding

    def compute_layout(
        self, snapshot: BoardSnapshot, tile_size: int, board_left: float, board_bottom: float
    ) -> Dict[BoardPos, Tuple[float, float, float, float]]:
        """Map each (row, col) to its (left, right, bottom, top) rectangle; row 0 is drawn on top."""
        n = snapshot.grid_size
        pad = self._padding
        layout: Dict[BoardPos, Tuple[float, float, float, float]] = {}
        for row in range(n):
            for col in range(n):
                left = board_left + col * tile_size
                bottom = board_bottom + (n - 1 - row) * tile_size
                layout[(row, col)] = (left + pad, left + tile_size - pad, bottom + pad, bottom + tile_size - pad)
        return layout

    def render(self, arcade, snapshot: BoardSnapshot, tile_size: int, board_left: float,
               board_bottom: float, headless: bool, merged: Set[BoardPos] | None = None) -> None:
        rs = self._rs
        layout = self.compute_layout(snapshot, tile_size, board_left, board_bottom)
        rs._last_tile_layout = layout
        if headless:
            return
        board_size = tile_size * snapshot.grid_size
        arcade.draw_lrbt_rectangle_filled(
            board_left, board_left + board_size, board_bottom, board_bottom + board_size, BACKGROUND_COLOR
        )
        for (row, col), (left, right, bottom, top) in layout.items():
            value = snapshot.value_at(row, col)
            arcade.draw_lrbt_rectangle_filled(left, right, bottom, top, tile_color(value))
            if snapshot.last_spawned == (row, col):
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, SPAWN_HIGHLIGHT_COLOR, 3)
            elif merged and (row, col) in merged:
                arcade.draw_lrbt_rectangle_outline(left, right, bottom, top, MERGE_HIGHLIGHT_COLOR, 2)
            if value == 0:
                continue
            arcade.draw_text(
                str(value),
                (left + right) / 2,
                (bottom + top) / 2,
                text_color(value),
                font_size_for(value, tile_size),
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
