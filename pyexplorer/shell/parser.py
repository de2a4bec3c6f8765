"""
Command Parser Module

Splits a command line into a command name and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)


class CommandParser:
    """
    Parses explorer command lines.
    
    Tokens are separated by runs of whitespace; there is no quoting,
    escaping or globbing.
    
    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("cd  projects ")
        >>> cmd.command, cmd.args
        ('cd', ['projects'])
    """
    
    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.
        
        Args:
            line: Command line string
        
        Returns:
            ParsedCommand or None if the line is blank
        """
        tokens = line.split()
        
        if not tokens:
            return None
        
        return ParsedCommand(command=tokens[0], args=tokens[1:])
