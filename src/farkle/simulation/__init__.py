# src/farkle/simulation/__init__.py
"""Automated play on top of the game engine."""
