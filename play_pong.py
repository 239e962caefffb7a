#!/usr/bin/env python3
"""
Main script to launch Classic Pong with PyGame graphical interface
"""

import logging
import sys

from classic_pong.gui.game_app import main
from classic_pong.utils.config import game_config

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    print("=== CLASSIC PONG ===")
    print()

    keys = game_config.get_keyboard_layout().display_names
    print("CONTROLS:")
    print(f"  Left paddle: {keys['up']}/{keys['down']} up/down, {keys['left']}/{keys['right']} left/right")
    print("  Right paddle: computer")
    print("  ESC or close the window: Quit")
    print()

    main()
    sys.exit(0)
