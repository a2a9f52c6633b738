"""
Configuration file support for the converter.
"""

import logging
import os
import json
from typing import Dict, Any, Optional
import threading

from ..converter import ConverterConfig
from ..elements import ElementTypeConfig
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "converter": {
        "use_tab": True,
        "tab_size": 1,
        "custom_elements": {},
    },
    "batch": {
        "input_dir": "html",
        "output_file": "output.json",
        "parser": "html5lib",
    },
}


def get_default_config_path() -> str:
    home_dir = os.path.expanduser("~")
    return os.path.join(home_dir, ".html_json_converter", "config.json")


class Config:
    """Configuration manager for the converter."""
    
    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.
        
        Args:
            config_path: Path to the JSON config file
        """
        self.config_path = config_path or get_default_config_path()
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()
        
        self.load()
        
        logger.debug(f"Configuration initialized (config_path: {self.config_path})")
    
    def load(self) -> None:
        """
        Load configuration from file.
        
        Raises:
            ConfigurationError: If the file exists but is not a JSON object
        """
        defaults = json.loads(json.dumps(DEFAULT_CONFIG))
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            with self._lock:
                self.config = defaults
            return
        
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Error loading configuration: {e}",
                                     {"path": self.config_path}) from e
        
        if not isinstance(loaded, dict):
            raise ConfigurationError("Configuration file must contain a JSON object",
                                     {"path": self.config_path})
        
        for section, values in loaded.items():
            if isinstance(values, dict) and isinstance(defaults.get(section), dict):
                defaults[section].update(values)
            else:
                defaults[section] = values
        
        with self._lock:
            self.config = defaults
        logger.debug(f"Configuration loaded from {self.config_path}")
    
    def save(self) -> None:
        """Save configuration to file."""
        with self._lock:
            config_copy = json.loads(json.dumps(self.config))
        
        config_dir = os.path.dirname(self.config_path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(config_copy, f, indent=4)
        
        logger.debug(f"Configuration saved to {self.config_path}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.
        
        Args:
            key: Configuration key (can be nested using dots, e.g. 'converter.tab_size')
            default: Default value if key doesn't exist
            
        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]
            return config.get(parts[-1], default)
    
    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.
        
        Args:
            key: Configuration key (can be nested using dots, e.g. 'converter.use_tab')
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')
            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]
            config[parts[-1]] = value
    
    def converter_config(self) -> ConverterConfig:
        """
        Build the converter settings from the ``converter`` section.
        
        Returns:
            ConverterConfig: The settings
            
        Raises:
            ConfigurationError: If a value has the wrong type or an element
                type name is unknown
        """
        use_tab = self.get("converter.use_tab", True)
        tab_size = self.get("converter.tab_size", 1)
        custom = self.get("converter.custom_elements", {}) or {}
        
        if not isinstance(use_tab, bool):
            raise ConfigurationError("converter.use_tab must be a boolean", {"value": use_tab})
        if isinstance(tab_size, bool) or not isinstance(tab_size, int) or tab_size < 0:
            raise ConfigurationError("converter.tab_size must be a non-negative integer",
                                     {"value": tab_size})
        if not isinstance(custom, dict):
            raise ConfigurationError("converter.custom_elements must be an object")
        
        custom_elements = {}
        for tag_name, definition in custom.items():
            if not isinstance(definition, dict):
                raise ConfigurationError(f"Element definition for '{tag_name}' must be an object")
            custom_elements[tag_name] = ElementTypeConfig.from_dict(definition)
        
        return ConverterConfig(use_tab=use_tab, tab_size=tab_size, custom_elements=custom_elements)
