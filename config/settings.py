"""Pendulum Metronome Configuration - Load settings from environment variables."""

import os
from dotenv import load_dotenv

load_dotenv()

# Tempo
DEFAULT_BPM = float(os.getenv('DEFAULT_BPM', '60'))
MIN_BPM = float(os.getenv('MIN_BPM', '20'))
MAX_BPM = float(os.getenv('MAX_BPM', '300'))

# Accent cycle is fixed at 4 beats
BEATS_PER_BAR = 4

# Sound Settings
SOUND_BACKEND = os.getenv('SOUND_BACKEND', 'auto')
SOUND_VOLUME = float(os.getenv('SOUND_VOLUME', '0.8'))

# Display
SWING_ANGLE = float(os.getenv('SWING_ANGLE', '30'))
FRAME_INTERVAL_MS = int(os.getenv('FRAME_INTERVAL_MS', '16'))
UI_SCALE = float(os.getenv('UI_SCALE', '1.0'))

# Logging
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
LOG_FILE = os.getenv('LOG_FILE', '')
