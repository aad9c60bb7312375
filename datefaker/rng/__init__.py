"""
Random source module.
"""
from .source import RandomSource, SeededRandomSource, random_element

__all__ = ["RandomSource", "SeededRandomSource", "random_element"]
