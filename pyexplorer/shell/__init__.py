"""
PyExplorer Shell Module

Provides the interactive command-line shell:
- Command parsing
- Built-in commands
- Colored console output
"""

from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands
from .console import Console
from .shell import Shell, ShellState

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'BuiltinCommands',
    'Console',
    'Shell',
    'ShellState',
]
