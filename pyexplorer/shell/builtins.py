"""
Shell Built-in Commands

Implements the explorer commands on top of the session state.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Callable, List

from pyexplorer.exceptions import ExplorerError
from pyexplorer.logger import get_logger


# (name, text, is_argument) rows of the help screen
HELP_ENTRIES = [
    ('cd', '<directory>', True),
    ('ls', 'List directory contents', False),
    ('open', '<file>', True),
    ('delete', '<file>', True),
    ('create', '<file>', True),
    ('help', 'Show this help', False),
    ('exit', 'Exit the program', False),
]


class BuiltinCommands:
    """
    Built-in explorer commands.
    
    Each command takes the argument list and returns an exit code:
    0 on success, 1 on failure or bad usage.
    """
    
    def __init__(self, shell):
        """
        Initialize built-in commands.
        
        Args:
            shell: The shell instance
        """
        self._shell = shell
        self._logger = get_logger('builtins')
        self._commands: dict[str, Callable[[List[str]], int]] = {
            'cd': self.cmd_cd,
            'ls': self.cmd_ls,
            'open': self.cmd_open,
            'delete': self.cmd_delete,
            'create': self.cmd_create,
            'help': self.cmd_help,
            'exit': self.cmd_exit,
        }
    
    def execute(self, name: str, args: List[str]) -> int:
        """
        Execute a built-in command.
        
        Expected failures are printed as a single line; anything else is
        logged with its traceback and printed the same way. Either way
        the session carries on.
        
        Args:
            name: Command name
            args: Command arguments
        
        Returns:
            Exit code
        """
        cmd = self._commands.get(name)
        if cmd is None:
            self._shell.console.unknown(name)
            return 127
        
        try:
            return cmd(args)
        except ExplorerError as e:
            self._shell.console.failure(str(e))
            return 1
        except Exception as e:
            self._logger.exception(f"Command '{name}' crashed", exc=e)
            self._shell.console.failure(str(e) or type(e).__name__)
            return 1
    
    def _require_arg(self, args: List[str], usage: str) -> bool:
        if args:
            return True
        self._shell.console.usage(usage)
        return False
    
    # Command implementations
    
    def cmd_cd(self, args: List[str]) -> int:
        """Change directory."""
        if not self._require_arg(args, "cd <directory>"):
            return 1
        
        explorer = self._shell.explorer
        explorer.change_directory(args[0])
        self._shell.console.success(f"Changed directory to {explorer.current_dir}")
        return 0
    
    def cmd_ls(self, args: List[str]) -> int:
        """List directory contents."""
        explorer = self._shell.explorer
        entries = explorer.list_entries()
        
        console = self._shell.console
        console.heading(f"Contents of {explorer.current_dir}:")
        for entry in entries:
            console.entry(entry.name, entry.is_dir)
        return 0
    
    def cmd_open(self, args: List[str]) -> int:
        """Open a file with its default application."""
        if not self._require_arg(args, "open <filename>"):
            return 1
        
        self._shell.explorer.open_file(args[0])
        self._shell.console.success(f"Opened {args[0]}")
        return 0
    
    def cmd_delete(self, args: List[str]) -> int:
        """Delete a file or a directory tree."""
        if not self._require_arg(args, "delete <filename>"):
            return 1
        
        self._shell.explorer.delete_path(args[0])
        self._shell.console.success(f"Deleted {args[0]}")
        return 0
    
    def cmd_create(self, args: List[str]) -> int:
        """Create an empty file."""
        if not self._require_arg(args, "create <filename>"):
            return 1
        
        self._shell.explorer.create_file(args[0])
        self._shell.console.success(f"Created {args[0]}")
        return 0
    
    def cmd_help(self, args: List[str]) -> int:
        """Display help information."""
        self._shell.console.help(HELP_ENTRIES)
        return 0
    
    def cmd_exit(self, args: List[str]) -> int:
        """Exit the shell."""
        self._shell.request_exit()
        return 0
