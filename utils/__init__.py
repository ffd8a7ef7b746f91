"""
Utility functions package for the golf scoring system.
"""

from .text_utils import TextUtils

__all__ = ['TextUtils']
