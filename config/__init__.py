"""
Configuration package for the golf scoring system.
"""

from .config_manager import ConfigManager
from .round_loader import RoundLoader

__all__ = ['ConfigManager', 'RoundLoader']
