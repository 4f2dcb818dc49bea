"""Window setup and the main loop."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from typing import Any

import pygame

from songe.media import PygameMedia
from songe.resources import Config, Resources, ResourceError
from songe.screens import register_screens
from songe.state import Context
from songe.state_manager import QuitGame, StateManager, StateName

BACKGROUND = (0, 0, 0)


def _fullscreen_size(default: tuple[int, int]) -> tuple[int, int]:
    pygame.display.init()
    modes = pygame.display.list_modes()
    if modes and modes != -1:
        return tuple(modes[0])
    return default


def create_context(config: Config | None = None, media: Any = None) -> Context:
    """Build the shared context with every screen registered."""
    config = config if config is not None else Config()
    size = (config.window_width, config.window_height)
    if config.fullscreen:
        size = _fullscreen_size(size)
    context = Context(
        resources=Resources(config),
        media=media if media is not None else PygameMedia(),
        size=size,
    )
    register_screens(StateManager(), context)
    return context


def _open_window(context: Context) -> pygame.Surface:
    config = context.resources.config
    if not config.fullscreen:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
    pygame.display.init()
    pygame.font.init()
    flags = pygame.FULLSCREEN if config.fullscreen else 0
    try:
        screen = pygame.display.set_mode(context.size, flags, vsync=int(config.enable_vsync))
    except pygame.error:
        screen = pygame.display.set_mode(context.size, flags)
    pygame.display.set_caption(config.window_title)
    pygame.mouse.set_visible(config.show_cursor)
    return screen


def run(context: Context, max_frames: int | None = None) -> int:
    """Open the window and drive the current state until the game ends.

    Returns the number of frames drawn.
    """
    manager = context.manager
    if manager is None:
        raise ValueError("context has no state manager")
    config = context.resources.config
    screen = _open_window(context)
    clock = pygame.time.Clock()
    frames = 0
    try:
        manager.enter_state(StateName.INITIAL_MENU)
        running = True
        while running and (max_frames is None or frames < max_frames):
            state = manager.current
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                state.handle_event(event)
            state.complex_events()
            state.update()
            screen.fill(BACKGROUND)
            state.render(screen)
            pygame.display.flip()
            frames += 1
            clock.tick(config.framerate_limit)
    except QuitGame:
        pass
    finally:
        pygame.display.quit()
    return frames


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="songe", description="An audio-guided adventure game.")
    parser.add_argument("--fullscreen", action="store_true", help="use the first fullscreen mode")
    parser.add_argument("--resources", help="directory holding the game resources")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    config = Config()
    if args.fullscreen:
        config = dataclasses.replace(config, fullscreen=True)
    if args.resources:
        path = args.resources if args.resources.endswith("/") else args.resources + "/"
        config = dataclasses.replace(config, resources_path=path)

    try:
        run(create_context(config), args.frames)
    except ResourceError as exc:
        print(exc, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())