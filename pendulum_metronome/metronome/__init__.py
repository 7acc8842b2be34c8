"""Beat timing, tempo and sound cues."""
