"""Rules and helpers for a language-learning community chat bot."""

__version__ = "0.1.0"

__all__ = [
    "ban",
    "guild",
    "leaderboard",
    "learning_greek",
    "roles",
    "starboard",
    "timestamp",
    "utils",
    "voice_state",
]