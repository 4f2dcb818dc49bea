"""The concrete screens of the game and their wiring into the state manager."""

from __future__ import annotations

from typing import Any

import pygame

from songe.image_menu import ImageMenu
from songe.state import Context, State
from songe.state_manager import StateManager, StateName
from songe.text_menu import TextMenu

RED = (255, 0, 0)


def _is_key(event: Any, key: int) -> bool:
    return getattr(event, "type", None) == pygame.KEYDOWN and event.key == key


class InitialMenu(TextMenu):
    """Asks whether the player has already played the game."""

    def __init__(self, context: Context) -> None:
        super().__init__(
            context,
            "Avez-vous déjà joué au jeu ?",
            context.resources.voice("deja_joue"),
            "",
        )

    def init_options(self) -> list[str]:
        return ["Non", "Oui"]

    def init_options_voices(self) -> list[str]:
        voice = self.context.resources.voice
        return [voice("non"), voice("oui")]

    def handle_event(self, event: Any) -> None:
        super().handle_event(event)
        if _is_key(event, pygame.K_ESCAPE):
            self.context.manager.quit()
        elif _is_key(event, pygame.K_RETURN):
            self.context.resources.has_already_played = self.selected == 1
            self.context.manager.enter_state(StateName.MAIN_MENU)


class MainMenu(TextMenu):
    """The welcome screen: play, scores, mini-games or quit."""

    def __init__(self, context: Context) -> None:
        super().__init__(
            context,
            "Bienvenue dans l'univers de Songe",
            context.resources.voice("bienvenue"),
            context.resources.music("fond"),
        )

    def init_options(self) -> list[str]:
        return ["Jouer", "Scores", "Minijeux", "Quitter"]

    def init_options_voices(self) -> list[str]:
        voice = self.context.resources.voice
        return [voice("jouer"), voice("scores"), voice("minijeux"), voice("quitter")]

    def handle_event(self, event: Any) -> None:
        super().handle_event(event)
        manager = self.context.manager
        if _is_key(event, pygame.K_ESCAPE):
            manager.enter_state(StateName.INITIAL_MENU)
        elif _is_key(event, pygame.K_RETURN):
            if self.selected == 0:
                manager.enter_state(StateName.CHOICE_PERSO_MENU, True)
            elif self.selected == 3:
                manager.quit()


class ChoicePersoMenu(ImageMenu):
    """Lets the player pick a character."""

    def __init__(self, context: Context) -> None:
        super().__init__(context, "", context.resources.voice("title_choiceperso"), "")

    def init_options(self) -> list[str]:
        return ["Aurore", "Timéo", "Tux", "Lamasticot"]

    def init_options_voices(self) -> list[str]:
        voice = self.context.resources.voice
        return [voice("aurore"), voice("timeo"), voice("tux"), voice("lamasticot")]

    def init_images(self) -> list[str]:
        image = self.context.resources.image
        return [
            image("interrogation.png"),
            image("interrogation.png"),
            image("tux.png"),
            image("lama.png"),
        ]

    def handle_event(self, event: Any) -> None:
        super().handle_event(event)
        manager = self.context.manager
        if _is_key(event, pygame.K_ESCAPE):
            manager.enter_state(StateName.MAIN_MENU)
        elif _is_key(event, pygame.K_RETURN):
            manager.enter_state(StateName.GAMEPLAY)


class Gameplay(State):
    """The game itself; for now it shows its name and returns to the menu on Escape."""

    FONT_NAME = "sansation"
    FONT_SIZE = 50
    TEXT = "Gameplay"

    def __init__(self, context: Context) -> None:
        super().__init__(context)
        self.font: Any = None

    def init(self) -> None:
        path = self.context.resources.font(self.FONT_NAME)
        try:
            self.font = self.context.media.load_font(path, self.FONT_SIZE)
        except OSError:
            self.context.resources.error(f"Font {self.FONT_NAME} could not be found.")
            raise

    def reset(self) -> None:
        """Gameplay keeps no progress between visits."""

    def on_enter(self) -> None:
        """Nothing starts when gameplay is entered."""

    def on_leave(self) -> None:
        """Nothing needs stopping when gameplay is left."""

    def handle_event(self, event: Any) -> None:
        if _is_key(event, pygame.K_ESCAPE):
            self.context.manager.enter_state(StateName.MAIN_MENU, True)

    def complex_events(self) -> None:
        """Gameplay polls no continuous input yet."""

    def update(self) -> None:
        """Gameplay has no per-frame logic yet."""

    def render(self, surface: Any) -> None:
        surface.blit(self.font.render(self.TEXT, True, RED), (0, 0))


def register_screens(manager: StateManager, context: Context) -> None:
    """Register every screen with the manager and attach the manager to the context."""
    if context.manager is None:
        context.manager = manager
    manager.register(StateName.INITIAL_MENU, lambda: InitialMenu(context))
    manager.register(StateName.MAIN_MENU, lambda: MainMenu(context))
    manager.register(StateName.CHOICE_PERSO_MENU, lambda: ChoicePersoMenu(context))
    manager.register(StateName.GAMEPLAY, lambda: Gameplay(context))