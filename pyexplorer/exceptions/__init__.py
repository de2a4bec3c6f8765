"""
PyExplorer Exception Hierarchy

All custom exceptions inherit from ExplorerError so the command loop can
catch every expected failure in one place.

Architecture:
    ExplorerError (Base)
    ├── DirectoryNotFoundError
    ├── FileOperationError
    └── ConfigError
"""

from .fs_exceptions import (
    ExplorerError,
    DirectoryNotFoundError,
    FileOperationError,
    ConfigError,
)

__all__ = [
    "ExplorerError",
    "DirectoryNotFoundError",
    "FileOperationError",
    "ConfigError",
]
