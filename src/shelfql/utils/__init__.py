"""Utility helpers for shelfql."""
