"""Utility helpers for pondo."""
