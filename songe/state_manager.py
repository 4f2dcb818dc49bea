"""Switching between the game's screens."""

from __future__ import annotations

import enum
from typing import Callable

from songe.state import State


class StateName(enum.Enum):
    INITIAL_MENU = enum.auto()
    MAIN_MENU = enum.auto()
    CHOICE_PERSO_MENU = enum.auto()
    GAMEPLAY = enum.auto()


class QuitGame(Exception):
    """Raised to end the game cleanly."""


class StateManager:
    """Creates each state on first use and keeps track of the current one."""

    def __init__(self) -> None:
        self._factories: dict[StateName, Callable[[], State]] = {}
        self._instances: dict[StateName, State] = {}
        self._current: State | None = None

    @property
    def current(self) -> State | None:
        return self._current

    def register(self, name: StateName, factory: Callable[[], State]) -> None:
        self._factories[name] = factory

    def enter_state(self, name: StateName, reinit: bool = False) -> State:
        """Leave the current state and enter the named one, creating it if needed."""
        if name not in self._factories:
            raise ValueError(f"StateName {name} doesn't exist!")
        if self._current is not None:
            self._current.on_leave()
        state = self._instances.get(name)
        if state is None:
            state = self._factories[name]()
            state.init()
            self._instances[name] = state
        if reinit:
            state.reset()
        self._current = state
        state.on_enter()
        return state

    def quit(self) -> None:
        """Let the current state wind down, then end the game."""
        if self._current is not None:
            self._current.on_leave()
        raise QuitGame()