"""Data models for tapsmith."""

from .formula_data import FormulaData
from .release import Release, ReleaseAsset

__all__ = ["FormulaData", "Release", "ReleaseAsset"]
