from __future__ import annotations

import sys
import traceback  # For error reporting
from typing import Any

import pygame

from .config import configured_seed, load_config, save_config, window_scale
from .rng import generate_seed, seed_rng
from .screen_constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .screens import ScreenID, ScreenTransition
from .windowing import apply_window_scale


# --- Main Entry Point ---
def main() -> None:
    pygame.init()
    try:
        pygame.font.init()
    except pygame.error as e:
        print(f"Pygame font failed to initialize: {e}")
        # Font errors are non-fatal; the HUD just stays empty

    from .screens.gameplay import gameplay_screen

    config: dict[str, Any]
    config, config_path = load_config()
    if not config_path.exists():
        save_config(config, config_path)

    seed = configured_seed(config)
    applied_seed = seed_rng(seed if seed is not None else generate_seed())
    print(f"Random seed: {applied_seed}")

    apply_window_scale(window_scale(config))
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT)).convert()
    clock = pygame.time.Clock()

    next_screen = ScreenID.GAMEPLAY
    while next_screen is not ScreenID.EXIT:
        transition: ScreenTransition
        try:
            transition = gameplay_screen(screen, clock, config, FPS)
        except SystemExit:
            break
        except Exception:
            print("An unhandled error occurred during game execution:")
            traceback.print_exc()
            break
        next_screen = transition.next_screen

    pygame.quit()  # Quit pygame only once at the very end of main
    sys.exit()


if __name__ == "__main__":
    main()
