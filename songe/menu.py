"""A voiced menu: a title, a list of options and keyboard navigation."""

from __future__ import annotations

from abc import abstractmethod
from typing import Any

import pygame

from songe.media import Sound, SoundStatus
from songe.state import Context, State

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


class Menu(State):
    """Base of every menu screen; subclasses supply the options and their voices."""

    FONT_NAME = "sansation"
    FONT_SIZE = 40
    VOLUME_WHEN_PLAYING = 0
    TITLE_TEXT_COLOR = BLACK
    ITEM_TEXT_COLOR = WHITE
    SEL_ITEM_TEXT_COLOR = BLACK

    def __init__(self, context: Context, title: str, title_voice: str, music_file: str = "") -> None:
        super().__init__(context)
        width, height = context.size
        self.title_height = height // 7
        self.title_width = 4 * width // 5
        self.item_height = height // 7
        self.item_width = 4 * width // 5
        self.sel_item_height = height // 7
        self.sel_item_width = 9 * width // 10
        self.font_size = self.FONT_SIZE
        self.title = title
        self.title_voice = title_voice
        self.music_file = music_file
        self.options: list[str] = []
        self.options_voices: list[str] = []
        self.option_sounds: list[Sound] = []
        self.music: Sound | None = None
        self.title_sound: Sound | None = None
        self._selected = 0
        self._first_played_once = False
        self._fonts: dict[int, Any] = {}

    @property
    def selected(self) -> int:
        return self._selected

    @abstractmethod
    def init_options(self) -> list[str]:
        """The labels of the menu's options, in order."""

    @abstractmethod
    def init_options_voices(self) -> list[str]:
        """The voice file read out for each option."""

    # -- loading ---------------------------------------------------------

    def _load_sound(self, path: str, loop: bool) -> Sound:
        try:
            return self.context.media.load_sound(path, loop)
        except OSError:
            self.context.resources.error(f"File {path} could not be found.")
            raise

    def _font_for(self, size: int) -> Any:
        font = self._fonts.get(size)
        if font is None:
            path = self.context.resources.font(self.FONT_NAME)
            try:
                font = self.context.media.load_font(path, size)
            except OSError:
                self.context.resources.error(f"Font {self.FONT_NAME} could not be found.")
                raise
            self._fonts[size] = font
        return font

    @property
    def font(self) -> Any:
        return self._font_for(self.font_size)

    def _fit_title(self) -> None:
        if not self.title:
            return
        while self.font.size(self.title)[0] < self.title_width:
            self.font_size += 1
        while self.font.size(self.title)[0] > self.title_width and self.font_size > 1:
            self.font_size -= 1

    def init(self) -> None:
        self.options = list(self.init_options())
        self.options_voices = list(self.init_options_voices())
        self._first_played_once = False
        if self.music_file:
            self.music = self._load_sound(self.music_file, True)
        self.title_sound = self._load_sound(self.title_voice, False)
        self.option_sounds = [self._load_sound(path, False) for path in self.options_voices]
        self._font_for(self.font_size)
        self._fit_title()

    # -- lifecycle -------------------------------------------------------

    def reset(self) -> None:
        self.select(0)
        self._first_played_once = False
        if self.music is not None:
            self.music.volume = 100

    def on_enter(self) -> None:
        self.title_sound.play()
        if self.music is not None:
            self.music.play()

    def on_leave(self) -> None:
        if self.music is not None:
            self.music.stop()
        self.title_sound.stop()
        for sound in self.option_sounds:
            sound.stop()

    # -- input -----------------------------------------------------------

    def select(self, index: int) -> None:
        if not 0 <= index < len(self.options):
            raise IndexError(f"no option {index}")
        self._selected = index

    def select_previous(self) -> None:
        self.select(self._selected - 1 if self._selected > 0 else len(self.options) - 1)

    def select_next(self) -> None:
        self.select(self._selected + 1 if self._selected + 1 < len(self.options) else 0)

    def _announce_selection(self) -> None:
        if self.title_sound.status is not SoundStatus.PLAYING:
            if self.music is not None:
                self.music.volume = self.VOLUME_WHEN_PLAYING
            self.option_sounds[self._selected].play()

    def handle_event(self, event: Any) -> None:
        if getattr(event, "type", None) != pygame.KEYDOWN:
            return
        if event.key in (pygame.K_UP, pygame.K_LEFT):
            self.select_previous()
        elif event.key in (pygame.K_DOWN, pygame.K_RIGHT):
            self.select_next()
        else:
            return
        self._announce_selection()

    def complex_events(self) -> None:
        """Run the held-key actions; navigation itself happens on key presses."""
        super().complex_events()

    def update(self) -> None:
        if self.title_sound.status is not SoundStatus.PLAYING and not self._first_played_once:
            self.option_sounds[self._selected].play()
            self._first_played_once = True

        if self.music is not None and self.music.volume < 100:
            if not any(sound.status is SoundStatus.PLAYING for sound in self.option_sounds):
                self.music.volume += 1

    # -- drawing ---------------------------------------------------------

    def _title_position(self) -> tuple[float, float]:
        text_width, text_height = self.font.size(self.title)
        x = self.context.width // 2
        y = self.context.height // 10 + self.title_height // 2
        return (x - text_width / 2, y - text_height / 2)

    def _item_color(self, index: int) -> tuple[int, int, int]:
        return self.SEL_ITEM_TEXT_COLOR if index == self._selected else self.ITEM_TEXT_COLOR

    def item_position(self, index: int) -> tuple[float, float]:
        """Top-left corner where the label of option ``index`` is drawn."""
        text_width, _ = self.font.size(self.options[index])
        step = self.sel_item_height if index == self._selected else self.item_height
        return (self.context.width // 2 - text_width / 2, self.context.height // 3 + step * index)

    def _render_title(self, surface: Any) -> None:
        if self.title:
            image = self.font.render(self.title, True, self.TITLE_TEXT_COLOR)
            surface.blit(image, self._title_position())

    def _render_item(self, surface: Any, index: int) -> None:
        image = self.font.render(self.options[index], True, self._item_color(index))
        surface.blit(image, self.item_position(index))

    def render(self, surface: Any) -> None:
        self._render_title(surface)
        for index in range(len(self.options)):
            self._render_item(surface, index)