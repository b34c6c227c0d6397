# src/farkle/game/__init__.py
"""Scoring engine and two-player turn engine."""
