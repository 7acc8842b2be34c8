"""Pendulum Metronome main window."""

import time
import logging
import tkinter as tk
from tkinter import ttk
from typing import Optional

from config.settings import (
    DEFAULT_BPM, SOUND_BACKEND, SOUND_VOLUME, SWING_ANGLE,
    FRAME_INTERVAL_MS, UI_SCALE, LOG_LEVEL, LOG_FILE
)
from ..manager import MetronomeManager
from ..metronome.animation import PendulumSwing
from ..metronome.beat import BeatState
from ..metronome.player import CuePlayer
from .layers import MetronomeCanvas

logger = logging.getLogger(__name__)


class PendulumMetronomeApp:
    """Single-screen metronome: bpm label, swinging pendulum, tempo stepper."""

    def __init__(self, root: tk.Tk, bpm: float = DEFAULT_BPM, sound_backend: str = SOUND_BACKEND):
        """Initialize the application.

        Args:
            root: Tkinter root window
            bpm: Starting tempo
            sound_backend: Sound backend passed to the cue player
        """
        self.root = root
        self.root.title("Metronome")
        self.root.resizable(False, False)

        self.colors = {
            'bg': '#0d0d0d',
            'bg_secondary': '#1a1a1a',
            'accent': '#0075ba',
            'text': '#ffffff',
            'text_secondary': '#b3b3b3',
        }
        self.root.configure(bg=self.colors['bg'])

        self.style = ttk.Style()
        self.style.theme_use('clam')
        self.style.configure(
            'Stepper.TButton',
            background=self.colors['bg_secondary'],
            foreground=self.colors['text'],
            font=('Helvetica', 18, 'bold'),
            padding=(18, 4),
            borderwidth=0
        )
        self.style.map(
            'Stepper.TButton',
            background=[('active', self.colors['accent']), ('pressed', self.colors['accent'])]
        )

        player = CuePlayer(sound_backend, volume=SOUND_VOLUME, bell=self.root.bell, scheduler=self.root)
        self.manager = MetronomeManager(self.root, player=player, bpm=bpm)
        self.manager.on_beat = self._on_beat
        self.manager.on_tempo_change = lambda _bpm: self._update_bpm_label()

        self.swing = PendulumSwing(self.manager.beat.angle(SWING_ANGLE))
        self._frame_job: Optional[str] = None
        self._drawn_angle: Optional[float] = None

        self._build_gui()

        # Handle window close
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

        # The first beat sounds as soon as the window is shown
        self.root.after_idle(self._on_appear)

    def _build_gui(self):
        """Build the label, the metronome drawing and the stepper."""
        container = tk.Frame(self.root, bg=self.colors['bg'])
        container.pack(fill=tk.BOTH, expand=True, padx=16, pady=16)

        self.bpm_label = tk.Label(
            container,
            text=self.manager.tempo.label,
            font=('Helvetica', int(30 * UI_SCALE), 'bold'),
            bg=self.colors['bg'],
            fg=self.colors['text']
        )
        self.bpm_label.pack(pady=(0, 20))

        self.canvas = MetronomeCanvas(container, bg=self.colors['bg'], scale=UI_SCALE)
        self.canvas.pack(pady=10)

        stepper = tk.Frame(container, bg=self.colors['bg'])
        stepper.pack(pady=(20, 0))

        ttk.Button(
            stepper,
            text="−",
            style='Stepper.TButton',
            cursor='hand2',
            command=self.manager.decrement
        ).pack(side=tk.LEFT, padx=(0, 1))

        ttk.Button(
            stepper,
            text="+",
            style='Stepper.TButton',
            cursor='hand2',
            command=self.manager.increment
        ).pack(side=tk.LEFT)

        for key in ('<Up>', '<plus>', '<KP_Add>'):
            self.root.bind(key, lambda _e: self.manager.increment())
        for key in ('<Down>', '<minus>', '<KP_Subtract>'):
            self.root.bind(key, lambda _e: self.manager.decrement())

    def _on_appear(self):
        self.manager.start()
        self._animate()

    def _on_beat(self, state: BeatState, period: float):
        """Swing towards the new rest side; the swing lasts one beat."""
        self.swing.retarget(state.angle(SWING_ANGLE), period, time.perf_counter())

    def _update_bpm_label(self):
        self.bpm_label.config(text=self.manager.tempo.label)

    def _animate(self):
        """Redraw the pendulum and schedule the next frame."""
        angle = self.swing.angle_at(time.perf_counter())
        if angle != self._drawn_angle:
            self.canvas.set_angle(angle)
            self._drawn_angle = angle
        self._frame_job = self.root.after(FRAME_INTERVAL_MS, self._animate)

    def _on_close(self):
        """Handle application close."""
        if self._frame_job is not None:
            self.root.after_cancel(self._frame_job)
            self._frame_job = None
        self.manager.cleanup()
        self.root.destroy()


def setup_logging(level: str = LOG_LEVEL, log_file: str = LOG_FILE):
    """Configure root logging for the application."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        handlers=handlers
    )


def main(bpm: float = DEFAULT_BPM, sound_backend: str = SOUND_BACKEND, log_level: str = LOG_LEVEL):
    """Launch the Pendulum Metronome application."""
    setup_logging(log_level)
    root = tk.Tk()
    app = PendulumMetronomeApp(root, bpm=bpm, sound_backend=sound_backend)
    root.mainloop()


if __name__ == "__main__":
    main()
