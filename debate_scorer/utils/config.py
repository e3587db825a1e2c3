"""
Settings management for the scoring engine.

The rubric itself lives in its own YAML document (see ``scoring.rubric``);
this module only holds the tunables around it.
"""

import copy
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union

import yaml

from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    "input": {
        "max_characters": 20000
    },
    "scoring": {
        "rubric_path": None,
        "strict_rubric": False
    },
    "feedback": {
        "strength_threshold": 75,
        "improvement_threshold": 70,
        "excellent_threshold": 85,
        "good_threshold": 70,
        "short_response_words": 100,
        "detailed": False
    }
}


class ConfigManager:
    """Manages settings for the scoring engine"""
    
    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.
        
        Args:
            config_path: Path to YAML settings file, if None uses defaults
        """
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Config file not found: {config_path}")
            self.load_config(config_path)
    
    def load_config(self, config_path: Path) -> None:
        """Load settings from a YAML file and merge them over the defaults."""
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load config from {config_path}: {e}") from e
        
        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")
        
        self.config = self._merge_configs(DEFAULT_CONFIG, file_config)
        logger.info(f"Loaded configuration from {config_path}")
    
    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path like 'feedback.strength_threshold'
            default: Default value if key not found
            
        Returns:
            Configuration value or default
        """
        keys = key_path.split('.')
        value = self.config
        
        try:
            for key in keys:
                value = value[key]
            return value
        except (KeyError, TypeError):
            return default
    
    def set(self, key_path: str, value: Any) -> None:
        """
        Set configuration value using dot notation.
        
        Args:
            key_path: Dot-separated path like 'input.max_characters'
            value: Value to set
        """
        keys = key_path.split('.')
        config = self.config
        
        for key in keys[:-1]:
            if key not in config:
                config[key] = {}
            config = config[key]
        
        config[keys[-1]] = value
    
    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two configuration dictionaries."""
        result = copy.deepcopy(base)
        
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        
        return result
    
    def save_config(self, config_path: Path) -> None:
        """Save current configuration to YAML file."""
        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.config, f, default_flow_style=False, indent=2)
        logger.info(f"Saved configuration to {config_path}")
    