"""Song index, NCN file reading, lyrics and beat timing, and mixer control state for MIDI karaoke."""

__version__ = "0.1.0"