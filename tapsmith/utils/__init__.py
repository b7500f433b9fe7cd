"""Utility helpers for tapsmith."""
