"""A brick-breaker arcade game with a pygame window, pausable timers and a bottom-left-origin canvas."""

__version__ = "0.1.0"
__all__ = ["__version__"]