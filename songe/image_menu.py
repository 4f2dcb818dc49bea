"""A menu that shows one picture per option and the selected label."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

import pygame

from songe.menu import Menu
from songe.state import Context


class ImageMenu(Menu):
    """A menu laid out as a row of pictures; the selected one is shown full size."""

    MARGIN = 100
    UNSELECTED_SCALE = 0.5

    def __init__(self, context: Context, title: str, title_voice: str, music_file: str = "") -> None:
        super().__init__(context, title, title_voice, music_file)
        self.images: list[str] = []
        self.textures: list[Any] = []

    @abstractmethod
    def init_images(self) -> list[str]:
        """The picture file shown for each option."""

    def init(self) -> None:
        super().init()
        self.images = list(self.init_images())
        self.textures = [self._load_image(path) for path in self.images]

    def _load_image(self, path: str) -> Any:
        try:
            return self.context.media.load_image(path)
        except OSError:
            self.context.resources.error(f"File {path} could not be found.")
            raise

    def item_position(self, index: int) -> tuple[float, float]:
        """Top-left corner of the label of option ``index``, centred in the window."""
        text_width, text_height = self.font.size(self.options[index])
        return (
            self.context.width // 2 - text_width / 2,
            self.context.height // 2 - text_height / 2,
        )

    def sprite_layout(self, index: int) -> tuple[tuple[float, float], tuple[float, float]]:
        """Centre and size of the picture of option ``index``."""
        if not 0 <= index < len(self.textures):
            raise IndexError(f"no image {index}")
        row_width = self.context.width - self.MARGIN
        slot_width = row_width / len(self.textures)
        image_width, image_height = self.textures[index].get_size()
        width = slot_width
        height = width * image_height / image_width
        if index != self.selected:
            width *= self.UNSELECTED_SCALE
            height *= self.UNSELECTED_SCALE
        center = (index * slot_width + slot_width / 2, 3 * self.context.height / 4)
        return center, (width, height)

    def render(self, surface: Any) -> None:
        self._render_title(surface)
        if self.options:
            self._render_item(surface, self.selected)
        for index, texture in enumerate(self.textures):
            (x, y), (width, height) = self.sprite_layout(index)
            size = (max(1, round(width)), max(1, round(height)))
            sprite = pygame.transform.scale(texture, size)
            surface.blit(sprite, sprite.get_rect(center=(round(x), round(y))))