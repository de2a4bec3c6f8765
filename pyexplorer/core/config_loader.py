"""
PyExplorer Configuration Loader

Configuration management for the file explorer:
- JSON configuration file loading
- Default value handling
- Validation of section and value types

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from pyexplorer.exceptions import ConfigError


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class ShellConfig:
    """Interactive shell settings."""
    banner: str = " PyExplorer "
    use_colors: bool = True
    show_help_on_start: bool = True
    history_size: int = 1000


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False


@dataclass
class Config:
    """
    Main configuration container.
    
    Holds all configuration settings for the explorer.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.
    
    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.
    
    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.shell.banner)
         PyExplorer 
    """
    
    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()
    
    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance
    
    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.
        
        Args:
            config_path: Path to the configuration file
        
        Returns:
            Config object with loaded settings
        
        Raises:
            ConfigError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)
        
        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            )
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                path=config_path
            )
        
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a JSON object",
                path=config_path
            )
        
        self._config = self._parse_config(data)
        self._loaded = True
        return self._config
    
    @staticmethod
    def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
        section = data.get(name, {})
        if not isinstance(section, dict):
            raise ConfigError(
                f"Configuration section '{name}' must be a JSON object, "
                f"got {type(section).__name__}"
            )
        return section
    
    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()
        
        shell_data = self._section(data, 'shell')
        config.shell = ShellConfig(
            banner=shell_data.get('banner', config.shell.banner),
            use_colors=shell_data.get('use_colors', config.shell.use_colors),
            show_help_on_start=shell_data.get('show_help_on_start', config.shell.show_help_on_start),
            history_size=shell_data.get('history_size', config.shell.history_size),
        )
        
        log_data = self._section(data, 'logging')
        config.logging = LoggingConfig(
            level=log_data.get('level', config.logging.level),
            log_file=log_data.get('log_file', config.logging.log_file),
            console_output=log_data.get('console_output', config.logging.console_output),
        )
        
        self._validate(config)
        return config
    
    @staticmethod
    def _check_type(key: str, value: Any, expected: type) -> None:
        # bool is an int subclass; keep true/false out of integer fields
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(
                f"{key} must be of type {expected.__name__}, got {value!r}"
            )
    
    @classmethod
    def _validate(cls, config: Config) -> None:
        cls._check_type('shell.banner', config.shell.banner, str)
        cls._check_type('shell.use_colors', config.shell.use_colors, bool)
        cls._check_type('shell.show_help_on_start', config.shell.show_help_on_start, bool)
        cls._check_type('shell.history_size', config.shell.history_size, int)
        cls._check_type('logging.level', config.logging.level, str)
        cls._check_type('logging.console_output', config.logging.console_output, bool)
        if config.logging.log_file is not None:
            cls._check_type('logging.log_file', config.logging.log_file, str)
        
        if config.shell.history_size < 0:
            raise ConfigError(
                f"shell.history_size must be non-negative, "
                f"got {config.shell.history_size}"
            )
        
        level = config.logging.level.upper()
        if level not in LOG_LEVELS:
            raise ConfigError(f"Unknown log level: {config.logging.level}")
        config.logging.level = level
    
    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config
    
    def reset(self) -> None:
        """Drop any loaded settings and return to defaults."""
        self._config = Config()
        self._loaded = False


def get_config() -> Config:
    """
    Get the global configuration instance.
    
    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
