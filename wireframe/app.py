"""The interactive viewer: key actions, frame rendering and the window loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum

from .canvas import Canvas, draw_map
from .geometry import rotate_x, rotate_y, rotate_z
from .mapfile import MapError, WireMap, check_args, load_map

ANGLE_STEP = 4
RATIO_STEP = 0.1
TITLE = "FdF"


class Action(Enum):
    """What a held key asks the viewer to do for one frame."""

    ROTATE_X_UP = 1
    ROTATE_X_DOWN = 2
    ROTATE_Y_UP = 3
    ROTATE_Y_DOWN = 4
    ROTATE_Z_UP = 5
    ROTATE_Z_DOWN = 6
    ZOOM_IN = 7
    ZOOM_OUT = 8


class Viewer:
    """Holds a wireframe map and the canvas it is drawn on."""

    def __init__(self, wiremap: WireMap, canvas: Canvas | None = None) -> None:
        self.wiremap = wiremap
        self.canvas = Canvas() if canvas is None else canvas
        self.angle_x = 0
        self.angle_y = 0
        self.angle_z = 0

    def _apply(self, action: Action) -> None:
        if action is Action.ROTATE_X_UP:
            self.angle_x += ANGLE_STEP
        elif action is Action.ROTATE_X_DOWN:
            self.angle_x -= ANGLE_STEP
        elif action is Action.ROTATE_Y_UP:
            self.angle_y += ANGLE_STEP
        elif action is Action.ROTATE_Y_DOWN:
            self.angle_y -= ANGLE_STEP
        elif action is Action.ROTATE_Z_UP:
            self.angle_z += ANGLE_STEP
        elif action is Action.ROTATE_Z_DOWN:
            self.angle_z -= ANGLE_STEP
        elif action is Action.ZOOM_IN:
            self.wiremap.ratio += RATIO_STEP
        elif action is Action.ZOOM_OUT and self.wiremap.ratio > RATIO_STEP:
            self.wiremap.ratio -= RATIO_STEP

    def press(self, action: Action | None = None) -> None:
        """Run one frame with ``action`` held, or with no key held for ``None``.

        Angles and ratio start each frame from rest; a held action is applied
        and drawn, then the frame is drawn once more.
        """
        self.wiremap.ratio = 1.0
        self.angle_x = self.angle_y = self.angle_z = 0
        if action is not None:
            self._apply(action)
            self.render()
        self.render()

    def render(self) -> None:
        """Clear the canvas, rotate the points by the current angles and draw them."""
        self.canvas.clear()
        points = self.wiremap.points
        rotate_x(points, self.angle_x)
        rotate_y(points, self.angle_y)
        rotate_z(points, self.angle_z)
        draw_map(self.wiremap, self.canvas)


def _show(screen, canvas: Canvas) -> None:
    screen.fill((0, 0, 0))
    screen.lock()
    try:
        for (x, y), color in canvas.pixels.items():
            screen.set_at((x, y), ((color >> 24) & 0xFF, (color >> 16) & 0xFF, (color >> 8) & 0xFF))
    finally:
        screen.unlock()


def _run_window(viewer: Viewer) -> None:
    import pygame

    bindings = [
        (pygame.K_w, Action.ROTATE_X_UP),
        (pygame.K_s, Action.ROTATE_X_DOWN),
        (pygame.K_a, Action.ROTATE_Y_UP),
        (pygame.K_d, Action.ROTATE_Y_DOWN),
        (pygame.K_q, Action.ROTATE_Z_UP),
        (pygame.K_e, Action.ROTATE_Z_DOWN),
        (pygame.K_2, Action.ZOOM_IN),
        (pygame.K_1, Action.ZOOM_OUT),
    ]
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (viewer.canvas.width, viewer.canvas.height), pygame.RESIZABLE
        )
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            keys = pygame.key.get_pressed()
            action = next((act for key, act in bindings if keys[key]), None)
            viewer.press(action)
            if keys[pygame.K_ESCAPE]:
                running = False
            _show(screen, viewer.canvas)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the map named on the command line and show it in a window."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        wiremap = load_map(check_args(args))
    except MapError as exc:
        print(exc, file=sys.stderr)
        return 1
    _run_window(Viewer(wiremap))
    return 0


if __name__ == "__main__":
    sys.exit(main())