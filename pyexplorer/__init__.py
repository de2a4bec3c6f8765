"""
PyExplorer - An interactive command-line file browser

Keeps a current working directory and offers navigation, listing,
file creation, deletion and open-with-default-application commands.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .filesystem.explorer import FileExplorer, DirEntry
from .shell.shell import Shell, ShellState

__all__ = [
    'FileExplorer',
    'DirEntry',
    'Shell',
    'ShellState',
]
