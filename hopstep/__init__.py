"""Core object model for a small game engine: names, reflection, delegates, garbage collection and engine globals."""

__version__ = "0.1.0"