# src/main.py
"""Run SeasonLab from a source checkout: ``python src/main.py``."""

from season_sim.app import main


if __name__ == "__main__":
    main()
