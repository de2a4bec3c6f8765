"""
PyExplorer Core Module

Configuration management shared by the shell and the logger.
"""

from .config_loader import (
    Config,
    ShellConfig,
    LoggingConfig,
    ConfigLoader,
    get_config,
)

__all__ = [
    'Config',
    'ShellConfig',
    'LoggingConfig',
    'ConfigLoader',
    'get_config',
]
