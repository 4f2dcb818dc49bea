"""The shared context and the interface every game screen implements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Mapping

import pygame

from songe.resources import Resources


@dataclass
class Context:
    """What every state needs: resources, asset loading, window size and the manager."""

    resources: Resources
    media: Any
    size: tuple[int, int]
    manager: Any = None

    @property
    def width(self) -> int:
        return self.size[0]

    @property
    def height(self) -> int:
        return self.size[1]


class State(ABC):
    """One screen of the game, driven by the main loop.

    The lifecycle hooks are ``init`` (first creation), ``reset``, ``on_enter``
    and ``on_leave``; each frame the loop calls ``handle_event`` for every
    window event, then ``complex_events``, ``update`` and ``render``.
    """

    def __init__(self, context: Context) -> None:
        self.context = context

    @abstractmethod
    def init(self) -> None: ...

    @abstractmethod
    def reset(self) -> None: ...

    @abstractmethod
    def on_enter(self) -> None: ...

    @abstractmethod
    def on_leave(self) -> None: ...

    @abstractmethod
    def handle_event(self, event: Any) -> None: ...

    @abstractmethod
    def update(self) -> None: ...

    @abstractmethod
    def render(self, surface: Any) -> None: ...

    def held_key_actions(self) -> Mapping[int, Callable[[], None]]:
        """Actions to run on every frame while their key is held down."""
        return {}

    def complex_events(self) -> None:
        """Run, once for this frame, the action of every key that is held down."""
        actions = self.held_key_actions()
        if not actions:
            return
        pressed = pygame.key.get_pressed()
        for key, action in actions.items():
            if pressed[key]:
                action()