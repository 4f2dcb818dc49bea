"""A menu whose title and options are drawn as framed rectangles."""

from __future__ import annotations

from typing import Any

import pygame

from songe.menu import Menu
from songe.state import Context

Color = tuple[int, int, int]


class TextMenu(Menu):
    """A menu that frames its title and each option in an outlined box."""

    BORDER_THICKNESS = 10
    TITLE_COLOR: Color = (250, 240, 240)
    TITLE_BORDER_COLOR: Color = (255, 255, 255)
    ITEM_COLOR: Color = (0, 0, 200)
    ITEM_BORDER_COLOR: Color = (0, 0, 220)
    SEL_ITEM_COLOR: Color = (250, 240, 240)
    SEL_ITEM_BORDER_COLOR: Color = (255, 255, 255)

    def __init__(self, context: Context, title: str, title_voice: str, music_file: str = "") -> None:
        super().__init__(context, title, title_voice, music_file)
        self.font_size = self.item_height // 2
        self.title_shape: pygame.Rect | None = None

    def init(self) -> None:
        super().init()
        self.title_shape = self.title_rect()

    def title_rect(self) -> pygame.Rect:
        """The box behind the title."""
        x = self.context.width // 2 - self.title_width // 2
        y = self.context.height // 10
        return pygame.Rect(x, y, self.title_width, self.title_height)

    def item_rect(self, index: int) -> pygame.Rect:
        """The box behind option ``index``; the selected one is wider."""
        if not 0 <= index < len(self.options):
            raise IndexError(f"no option {index}")
        if index == self.selected:
            width, height = self.sel_item_width, self.sel_item_height
        else:
            width, height = self.item_width, self.item_height
        x = self.context.width // 2 - width // 2
        y = self.context.height // 3 + height * index
        return pygame.Rect(x, y, width, height)

    def item_colors(self, index: int) -> tuple[Color, Color]:
        """Fill and border colours of option ``index``."""
        if index == self.selected:
            return self.SEL_ITEM_COLOR, self.SEL_ITEM_BORDER_COLOR
        return self.ITEM_COLOR, self.ITEM_BORDER_COLOR

    def _draw_box(self, surface: Any, rect: pygame.Rect, fill: Color, border: Color) -> None:
        thickness = self.BORDER_THICKNESS
        pygame.draw.rect(surface, border, rect.inflate(2 * thickness, 2 * thickness))
        pygame.draw.rect(surface, fill, rect)

    def render(self, surface: Any) -> None:
        title_shape = self.title_shape if self.title_shape is not None else self.title_rect()
        self._draw_box(surface, title_shape, self.TITLE_COLOR, self.TITLE_BORDER_COLOR)
        for index in range(len(self.options)):
            fill, border = self.item_colors(index)
            self._draw_box(surface, self.item_rect(index), fill, border)
        super().render(surface)