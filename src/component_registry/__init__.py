"""Registry service exposing named kits of reusable UI components."""

__version__ = "0.1.0"
