#!/usr/bin/env python3
"""
Main script to launch Duel Pong with PyGame graphical interface
"""

import importlib.util
import sys

if __name__ == "__main__":
    missing = [
        name for name in ("pygame", "pydantic", "numpy") if importlib.util.find_spec(name) is None
    ]
    if missing:
        print("Missing dependencies: " + ", ".join(missing))
        print("Install them with: pip install -e .")
        sys.exit(1)

    from duel_pong.gui.game_app import main

    print("=== DUEL PONG ===")
    print()
    print("CONTROLS:")
    print("  Left player: W/S (Z/S on AZERTY)")
    print("  Right player: Up/Down arrows")
    print("  SPACE/ENTER or click: Start")
    print("  P: Pause")
    print("  ESC: Quit")
    print()

    sys.exit(main(sys.argv[1:]))
