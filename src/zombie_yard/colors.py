from __future__ import annotations

# Basic palette
WHITE: tuple[int, int, int] = (255, 255, 255)
BLACK: tuple[int, int, int] = (0, 0, 0)
RED: tuple[int, int, int] = (255, 0, 0)
GREEN: tuple[int, int, int] = (0, 128, 0)
BLUE: tuple[int, int, int] = (0, 0, 255)
LIGHT_GRAY: tuple[int, int, int] = (200, 200, 200)
YELLOW: tuple[int, int, int] = (255, 255, 0)

# World colors
GROUND_COLOR: tuple[int, int, int] = (52, 64, 48)
FENCE_COLOR: tuple[int, int, int] = (139, 69, 19)  # saddle brown
BUSH_COLOR: tuple[int, int, int] = (34, 139, 34)  # forest green
BARREL_COLOR: tuple[int, int, int] = BLACK

# Entity colors
PLAYER_COLOR: tuple[int, int, int] = BLUE
ZOMBIE_COLOR: tuple[int, int, int] = GREEN
BULLET_COLOR: tuple[int, int, int] = YELLOW
MISSILE_COLOR: tuple[int, int, int] = RED
MISSILE_FIN_COLOR: tuple[int, int, int] = LIGHT_GRAY

# Overlays
OVERLAY_COLOR: tuple[int, int, int, int] = (0, 0, 0, 150)
