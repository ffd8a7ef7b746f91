"""
Configuration management for the golf scoring system.
"""

import copy
import logging
import yaml
from typing import Dict, Any

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages configuration loading and provides default values."""

    @staticmethod
    def load_config(config_file: str) -> Dict[str, Any]:
        """Load configuration from YAML file, filling missing keys from the defaults."""
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning(f"Configuration file '{config_file}' not found. Using default configuration.")
            return ConfigManager.get_default_config()
        except yaml.YAMLError as e:
            logger.warning(f"Error parsing configuration file: {e}. Using default configuration.")
            return ConfigManager.get_default_config()

        return ConfigManager.merge_with_defaults(loaded)

    @staticmethod
    def merge_with_defaults(config: Dict[str, Any]) -> Dict[str, Any]:
        """Overlay a (possibly partial) config on the defaults, one section deep."""
        merged = ConfigManager.get_default_config()
        for key, value in config.items():
            if isinstance(value, dict) and isinstance(merged.get(key), dict):
                merged[key].update(value)
            else:
                merged[key] = value
        return merged

    @staticmethod
    def get_default_config() -> Dict[str, Any]:
        """Return default configuration if config file is not available."""
        return copy.deepcopy({
            'scoring': {
                'match_handicap_mode': 'full',
                'foursomes_allowance': 0.5
            },
            'points': {
                'match_win': 2,
                'match_halve': 1,
                'team_match_win': 1.0,
                'team_match_halve_share': 0.5
            },
            'reports': {
                'output_dir': 'reports',
                'metrics': ['gross', 'net', 'stableford']
            },
            'logging': {
                'level': 'INFO'
            }
        })
