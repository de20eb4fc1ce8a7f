# src/tutel/__init__.py

"""tutel: a minimalistic per-directory todo list for terminal enthusiasts."""

__version__ = "0.3.0"
