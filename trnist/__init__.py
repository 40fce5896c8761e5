"""Dictionary lookups, a translator interface and signal-driven display panels."""

__version__ = "0.1.0"
__all__ = ["signals", "dictionary", "translator", "panels"]