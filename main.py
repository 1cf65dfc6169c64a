"""Run the wavegen CLI from a source checkout: ``python main.py sine sine.wav``."""

import sys

from wavegen.cli import main


if __name__ == "__main__":
    sys.exit(main())
