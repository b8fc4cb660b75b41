"""Interactive wireframe viewer for height maps."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from enum import Enum, auto

from cursus.fdf_map import (
    HEIGHT,
    MOVE_SPEED,
    WIDTH,
    HeightMap,
    MapError,
    ViewSettings,
    parse_map,
)
from cursus.fdf_render import Canvas, draw_map, rotate_map

ROTATION_STEP = 0.05
DRAG_ROTATION = 0.01
MAX_SCALE = 100
MIN_SCALE = 1
ZOOM_IN = 1.1
ZOOM_OUT = 0.9


class Key(Enum):
    """Keys the viewer reacts to."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    LEFT_CONTROL = auto()
    LEFT_SHIFT = auto()
    TAB = auto()
    ESCAPE = auto()


def handle_key_offset(settings: ViewSettings, key: Key) -> None:
    """Move the view with the arrow keys."""
    if key is Key.UP:
        settings.offset_y -= MOVE_SPEED
    elif key is Key.DOWN:
        settings.offset_y += MOVE_SPEED
    elif key is Key.LEFT:
        settings.offset_x -= MOVE_SPEED
    elif key is Key.RIGHT:
        settings.offset_x += MOVE_SPEED


def handle_key_rotation(settings: ViewSettings, key: Key) -> None:
    """Rotate the view with the arrow keys."""
    if key is Key.UP:
        settings.rotation_angle_x += ROTATION_STEP
    elif key is Key.DOWN:
        settings.rotation_angle_x -= ROTATION_STEP
    elif key is Key.LEFT:
        settings.rotation_angle_y += ROTATION_STEP
    elif key is Key.RIGHT:
        settings.rotation_angle_y -= ROTATION_STEP


def handle_scroll(settings: ViewSettings, heightmap: HeightMap, ydelta: float,
                  mouse_x: int, mouse_y: int) -> None:
    """Zoom around the mouse position, or only stretch heights in scale mode."""
    factor = 1.0
    if ydelta > 0 and settings.scale < MAX_SCALE:
        factor = ZOOM_IN
    elif ydelta < 0 and settings.scale > MIN_SCALE:
        factor = ZOOM_OUT
    if not settings.scale_mode:
        settings.scale *= factor
        settings.offset_x = int(settings.offset_x + (mouse_x - settings.offset_x) * (1 - factor))
        settings.offset_y = int(settings.offset_y + (mouse_y - settings.offset_y) * (1 - factor))
    heightmap.scale_heights(factor)
    rotate_map(heightmap, settings)


def handle_mouse_move(settings: ViewSettings, x: int, y: int) -> bool:
    """Pan, or rotate in control mode, while the button is held; True if the view changed."""
    if not settings.mouse_pressed:
        return False
    delta_x = int(x) - settings.prev_mouse_x
    delta_y = int(y) - settings.prev_mouse_y
    if settings.control:
        settings.rotation_angle_x -= delta_y * DRAG_ROTATION
        settings.rotation_angle_y += delta_x * DRAG_ROTATION
    else:
        settings.offset_x += delta_x
        settings.offset_y += delta_y
    settings.prev_mouse_x = int(x)
    settings.prev_mouse_y = int(y)
    return True


def _handle_key(settings: ViewSettings, key: Key) -> bool:
    """Apply a key press; False when the viewer should close."""
    if settings.control:
        handle_key_rotation(settings, key)
    else:
        handle_key_offset(settings, key)
    if key is Key.LEFT_CONTROL:
        settings.control = not settings.control
    elif key is Key.LEFT_SHIFT:
        settings.color_mode = not settings.color_mode
    elif key is Key.TAB:
        settings.scale_mode = not settings.scale_mode
    elif key is Key.ESCAPE:
        return False
    return True


def _run_window(settings: ViewSettings, heightmap: HeightMap) -> None:
    import pygame

    key_map = {
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
        pygame.K_LCTRL: Key.LEFT_CONTROL,
        pygame.K_LSHIFT: Key.LEFT_SHIFT,
        pygame.K_TAB: Key.TAB,
        pygame.K_ESCAPE: Key.ESCAPE,
    }
    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption("fdf")
        pygame.key.set_repeat(200, 30)
        canvas = Canvas(WIDTH, HEIGHT)
        clock = pygame.time.Clock()
        running, dirty = True, True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in key_map:
                    running = _handle_key(settings, key_map[event.key])
                    dirty = True
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    settings.mouse_pressed = True
                    settings.prev_mouse_x, settings.prev_mouse_y = event.pos
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    settings.mouse_pressed = False
                elif event.type == pygame.MOUSEMOTION:
                    dirty = handle_mouse_move(settings, *event.pos) or dirty
                elif event.type == pygame.MOUSEWHEEL:
                    mouse_x, mouse_y = pygame.mouse.get_pos()
                    handle_scroll(settings, heightmap, event.y, mouse_x, mouse_y)
                    dirty = True
            if running and dirty:
                rotate_map(heightmap, settings)
                draw_map(canvas, settings, heightmap)
                pixels = canvas.pixels
                if sys.byteorder == "big":
                    pixels = type(pixels)(pixels)
                    pixels.byteswap()
                data = pixels.tobytes()
                surface = pygame.image.frombuffer(data, (canvas.width, canvas.height), "BGRA")
                screen.blit(surface, (0, 0))
                pygame.display.flip()
                dirty = False
            clock.tick(60)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the map file named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        sys.stdout.write("Usage: fdf <map>\n")
        return 1
    settings = ViewSettings()
    try:
        heightmap = parse_map(args[0], settings)
    except MapError as exc:
        sys.stderr.write(f"fdf: {exc}\n")
        return 1
    _run_window(settings, heightmap)
    return 0


if __name__ == "__main__":
    sys.exit(main())