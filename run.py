#!/usr/bin/env python3
"""Launch the Pendulum Metronome application."""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from pendulum_metronome.gui.main_app import main

if __name__ == "__main__":
    main()
