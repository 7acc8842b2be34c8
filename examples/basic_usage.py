"""Basic usage example for Pendulum Metronome without the window."""

import sys
import tkinter as tk
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pendulum_metronome.geometry import Rect, RoundedTrapezoid
from pendulum_metronome.manager import MetronomeManager
from pendulum_metronome.metronome.player import CuePlayer


def main():
    """Basic usage example."""
    print("="*50)
    print("Pendulum Metronome - Basic Usage Example")
    print("="*50 + "\n")

    # Example 1: Trapezoid outline
    print("Example 1: Body outline")
    print("-" * 50)

    path = RoundedTrapezoid(0.5, ((15, 15),)).path(Rect(0, 0, 200, 350))
    for segment in path.segments:
        print(f"  {segment.kind:<5} {segment.point}")
    print()

    # Example 2: Beats on a hidden Tk root
    print("Example 2: Four seconds at 90 BPM, then 120 BPM")
    print("-" * 50)

    root = tk.Tk()
    root.withdraw()

    manager = MetronomeManager(root, player=CuePlayer("auto", bell=root.bell, scheduler=root), bpm=90)
    manager.on_beat = lambda state, period: print(
        f"  beat {manager.beat_count}: {state.side.value:<5} counter={state.counter} period={period:.3f}s"
    )
    manager.start()

    root.after(2000, lambda: manager.set_bpm(120))
    root.after(4000, root.quit)
    root.mainloop()

    # Example 3: Manager status
    print("\nExample 3: Manager status")
    print("-" * 50)

    status = manager.get_status()
    print(f"BPM: {status['bpm']}")
    print(f"Beats played: {status['beat_count']}")
    print(f"Sound backend: {status['sound_backend']}\n")

    # Cleanup
    manager.cleanup()
    root.destroy()
    print("Cleanup completed")

    print("\n" + "="*50)
    print("Example completed!")
    print("="*50)


if __name__ == "__main__":
    main()
