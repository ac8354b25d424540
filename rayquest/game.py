"""The game loop: read input, update the player, draw the frame."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

import pygame

from rayquest.render import Renderer
from rayquest.state import Action, InputState, new_player, update
from rayquest.world import H, W, default_map

TITLE = "Doom Nukem 3D"

_KEY_ACTIONS = (
    (pygame.K_ESCAPE, Action.QUIT),
    (pygame.K_LSHIFT, Action.CROUCH),
    (pygame.K_SPACE, Action.JUMP),
    (pygame.K_DOWN, Action.LOOK_DOWN),
    (pygame.K_UP, Action.LOOK_UP),
    (pygame.K_s, Action.MOVE_BACK),
    (pygame.K_a, Action.MOVE_LEFT),
    (pygame.K_d, Action.MOVE_RIGHT),
    (pygame.K_w, Action.MOVE_FORWARD),
    (pygame.K_RIGHT, Action.ROTATE_RIGHT),
    (pygame.K_LEFT, Action.ROTATE_LEFT),
)


def pressed_actions(keys) -> list[Action]:
    """Return the actions whose keys are down in a pressed-key table."""
    return [action for key, action in _KEY_ACTIONS if keys[key]]


class Game:
    """One running session drawing to a screen surface."""

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.tiles = default_map()
        self.player = new_player()
        self.inputs = InputState()
        self.renderer = Renderer(screen, self.tiles)

    def process_input(self) -> None:
        """Drain pending events and record the keys held down."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.inputs.running = False
        self.inputs.apply(pressed_actions(pygame.key.get_pressed()))

    def step(self) -> None:
        """Run one frame of the loop."""
        self.process_input()
        update(self.player, self.inputs)
        self.renderer.render(self.player)
        if pygame.display.get_init() and pygame.display.get_surface() is self.screen:
            pygame.display.flip()
        self.inputs.reset_keys()

    def run(self) -> None:
        """Step frames until the player asks to quit."""
        while self.inputs.running:
            self.step()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window and play until quit."""
    parser = argparse.ArgumentParser(prog="rayquest", description="A grid ray-casting game.")
    parser.parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode((W * 2, H))
        pygame.display.set_caption(TITLE)
        Game(screen).run()
    finally:
        pygame.quit()
    return 0