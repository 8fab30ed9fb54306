"""
Immutable lookup tables shared by every composition run.
"""

from src.core.data.palette import COLOR_MAP, COLORS, EMOJIS

__all__ = ["COLOR_MAP", "COLORS", "EMOJIS"]
