"""
╔══════════════════════════════════════════╗
║   🌲  IDLE FOREST  🌲                    ║
║   Python 3.8+  |  pip install pygame     ║
║   python main.py                         ║
╚══════════════════════════════════════════╝

Files:
  main.py      - entry point
  config.py    - constants, palette, upgrades
  world.py     - trees on the grid + grass tiles
  entities.py  - Player: stats, wood, upgrades
  sim.py       - idle tick (hunger, harvest, regrowth)
  daynight.py  - day/night overlay oscillator
  storage.py   - key-value save store
  renderer.py  - world canvas drawing
  ui.py        - HUD, buttons, game over
  game.py      - main Game loop
"""
import argparse

from config import SAVE
from game import Game


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Idle Forest")
    parser.add_argument("--save", default=SAVE, help=f"Save store file (default: {SAVE})")
    parser.add_argument("--seed", type=int, default=None, help="Seed for tree placement")
    return parser.parse_args(argv)


def main(argv=None):
    args = _parse_args(argv)
    Game(save_path=args.save, seed=args.seed).run()


if __name__ == "__main__":
    main()
