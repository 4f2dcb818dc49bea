"""A two-player Pong with a serve, paddles and a ball that resets on a miss."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

import pygame

BACKGROUND = (0, 0, 0)
FOREGROUND = (255, 255, 255)


@dataclass(frozen=True)
class PongSettings:
    """Sizes and speeds of the playing field."""

    window_width: int = 800
    window_height: int = 600
    bar_width: int = 12
    bar_height: int = 45
    ball_diameter: int = 12
    from_side: int = 40
    ball_speed_x: int = 8
    ball_speed_y: int = 8
    bar_speed: int = 10
    framerate_limit: int = 60
    reset_on_miss: bool = True
    wait_for_serve: bool = True

    @property
    def lbar_init_x(self) -> int:
        return self.from_side - self.bar_width // 2

    @property
    def lbar_init_y(self) -> int:
        return self.window_height // 2 - self.bar_height // 2

    @property
    def rbar_init_x(self) -> int:
        return self.window_width - self.from_side - self.bar_width // 2

    @property
    def rbar_init_y(self) -> int:
        return self.lbar_init_y


def move_bar_up(top: int, settings: PongSettings | None = None) -> int:
    """The new top of a bar moved up one step, kept inside the window."""
    settings = settings if settings is not None else PongSettings()
    return max(0, top - settings.bar_speed)


def move_bar_down(top: int, settings: PongSettings | None = None) -> int:
    """The new top of a bar moved down one step, kept inside the window."""
    settings = settings if settings is not None else PongSettings()
    top += settings.bar_speed
    if top + settings.bar_height > settings.window_height:
        top = settings.window_height - settings.bar_height
    return top


class Pong:
    """The state of one game: ball, ball speed, both bars and the pause flag."""

    def __init__(self, settings: PongSettings | None = None) -> None:
        self.settings = settings if settings is not None else PongSettings()
        self.speed_x = self.settings.ball_speed_x
        self.speed_y = self.settings.ball_speed_y
        self.ball_x = 0
        self.ball_y = 0
        self.lbar_x = 0
        self.lbar_y = 0
        self.rbar_x = 0
        self.rbar_y = 0
        self.paused = False
        self.reset()

    @property
    def ball(self) -> tuple[int, int]:
        return (self.ball_x, self.ball_y)

    def reset(self) -> None:
        """Centre the ball, put the bars back and wait for a serve."""
        s = self.settings
        self.paused = s.wait_for_serve
        self.ball_x = s.window_width // 2 - s.ball_diameter // 2
        self.ball_y = s.window_height // 2 - s.ball_diameter // 2
        self.lbar_x, self.lbar_y = s.lbar_init_x, s.lbar_init_y
        self.rbar_x, self.rbar_y = s.rbar_init_x, s.rbar_init_y

    def serve(self) -> None:
        self.paused = False

    def _moved(self, top: int, direction: int) -> int:
        if direction < 0:
            return move_bar_up(top, self.settings)
        if direction > 0:
            return move_bar_down(top, self.settings)
        raise ValueError("direction must be negative (up) or positive (down)")

    def move_left(self, direction: int) -> None:
        """Move the left bar up (negative direction) or down (positive)."""
        self.lbar_y = self._moved(self.lbar_y, direction)

    def move_right(self, direction: int) -> None:
        """Move the right bar up (negative direction) or down (positive)."""
        self.rbar_y = self._moved(self.rbar_y, direction)

    def _hits(self, px: int, py: int, bar_x: int, bar_y: int) -> bool:
        s = self.settings
        return not (
            px >= bar_x + s.bar_width
            or px + s.ball_diameter <= bar_x
            or py >= bar_y + s.bar_height
            or py + s.ball_diameter <= bar_y
        )

    def _move_ball(self) -> None:
        self.ball_x += self.speed_x
        self.ball_y += self.speed_y

    def step(self) -> None:
        """Advance the ball one frame, bouncing off walls and bars."""
        if self.paused:
            return
        s = self.settings
        self._move_ball()
        px, py = self.ball_x, self.ball_y

        if px > s.window_width or px < 0:
            self.speed_x = -self.speed_x
            if s.reset_on_miss:
                self.reset()
        if py > s.window_height or py < 0:
            self.speed_y = -self.speed_y

        for bar_x, bar_y in ((self.lbar_x, self.lbar_y), (self.rbar_x, self.rbar_y)):
            if self._hits(px, py, bar_x, bar_y):
                self.speed_x = -self.speed_x
                self._move_ball()


def _draw(screen: pygame.Surface, game: Pong) -> None:
    s = game.settings
    screen.fill(BACKGROUND)
    pygame.draw.rect(screen, FOREGROUND, (game.lbar_x, game.lbar_y, s.bar_width, s.bar_height))
    pygame.draw.rect(screen, FOREGROUND, (game.rbar_x, game.rbar_y, s.bar_width, s.bar_height))
    pygame.draw.ellipse(
        screen, FOREGROUND, (game.ball_x, game.ball_y, s.ball_diameter, s.ball_diameter)
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="pong", description="Two-player Pong.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    args = parser.parse_args(argv)

    game = Pong()
    settings = game.settings
    pygame.display.init()
    try:
        screen = pygame.display.set_mode((settings.window_width, settings.window_height))
        pygame.display.set_caption("Pong !")
        clock = pygame.time.Clock()
        frames = 0
        running = True
        while running and (args.frames is None or frames < args.frames):
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key == pygame.K_SPACE:
                        game.serve()

            keys = pygame.key.get_pressed()
            if keys[pygame.K_UP]:
                game.move_right(-1)
            if keys[pygame.K_z]:
                game.move_left(-1)
            if keys[pygame.K_DOWN]:
                game.move_right(1)
            if keys[pygame.K_s]:
                game.move_left(1)

            game.step()
            _draw(screen, game)
            pygame.display.flip()
            frames += 1
            clock.tick(settings.framerate_limit)
    finally:
        pygame.display.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())