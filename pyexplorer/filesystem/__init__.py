"""
PyExplorer Filesystem Module

Session state over the host filesystem:
- Current directory tracking
- File creation and deletion
- Directory listing
- Opening files with the default application
"""

from .explorer import FileExplorer, DirEntry
from .launcher import open_with_default_app

__all__ = [
    'FileExplorer',
    'DirEntry',
    'open_with_default_app',
]
