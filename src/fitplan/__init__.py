"""Template-based meal and workout plan generation."""

__version__ = "0.1.0"
